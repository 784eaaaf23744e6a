"""Shared pytest fixtures for gitinternals tests."""

import hashlib
import shutil
import tempfile
import zlib
from pathlib import Path

import pytest

from gitinternals.core.config import Config
from gitinternals.core.repository import Repository


AUTHOR = "Test User <test@example.com>"


class RepoBuilder:
    """
    Writes loose objects and refs into a git directory.
    
    Objects are stored exactly as git stores them: zlib-compressed
    ``<type> <length>\\0<body>`` under objects/<2 hex>/<38 hex>.
    """
    
    def __init__(self, git_dir: Path):
        self.git_dir = git_dir
        (git_dir / 'objects').mkdir(parents=True)
        (git_dir / 'refs' / 'heads').mkdir(parents=True)
        self.set_head('ref: refs/heads/main\n')
    
    def write(self, obj_type: str, body: bytes) -> str:
        """Store an object and return its digest."""
        data = f"{obj_type} {len(body)}".encode() + b'\0' + body
        digest = hashlib.sha1(data).hexdigest()
        path = self.git_dir / 'objects' / digest[:2] / digest[2:]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(data))
        return digest
    
    def blob(self, text: str) -> str:
        return self.write('blob', text.encode())
    
    def tree(self, entries) -> str:
        """Store a tree from (mode, name, digest) tuples, in the given order."""
        body = b''
        for mode, name, digest in entries:
            body += f"{mode} {name}".encode() + b'\0' + bytes.fromhex(digest)
        return self.write('tree', body)
    
    def commit(self, tree, parents=(), message="Test commit\n",
               timestamp=1600000000, zone='+0200', author=AUTHOR) -> str:
        lines = [f"tree {tree}"]
        lines += [f"parent {parent}" for parent in parents]
        lines.append(f"author {author} {timestamp} {zone}")
        lines.append(f"committer {author} {timestamp} {zone}")
        body = '\n'.join(lines) + '\n\n' + message
        return self.write('commit', body.encode())
    
    def branch(self, name: str, digest: str) -> None:
        path = self.git_dir / 'refs' / 'heads' / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(digest + '\n')
    
    def set_head(self, content: str) -> None:
        (self.git_dir / 'HEAD').write_text(content)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config and environment out of tests."""
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', tmp_path / 'gitinternalsconfig')
    for key in ('GITINTERNALS_FLATTEN_WORKERS', 'GITINTERNALS_LOG_MAX_COUNT',
                'GITINTERNALS_OUTPUT_COLOR'):
        monkeypatch.delenv(key, raising=False)
    return tmp_path / 'gitinternalsconfig'


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def builder(temp_dir):
    """Create an empty git directory under temp_dir/.git."""
    return RepoBuilder(temp_dir / '.git')


@pytest.fixture
def repo(builder):
    """Repository handle on the builder's git directory."""
    return Repository(str(builder.git_dir))


@pytest.fixture
def project(builder):
    """
    A small project tree committed once.
    
    Layout, in on-disk order:
        README.md
        src/main.py
        src/util/helpers.py
        LICENSE
    """
    helpers = builder.blob("def helper():\n    pass\n")
    util = builder.tree([('100644', 'helpers.py', helpers)])
    main = builder.blob("print('hi')\n")
    src = builder.tree([('100644', 'main.py', main), ('40000', 'util', util)])
    readme = builder.blob("# Project\n")
    license_ = builder.blob("MIT\n")
    root = builder.tree([
        ('100644', 'README.md', readme),
        ('40000', 'src', src),
        ('100644', 'LICENSE', license_),
    ])
    commit = builder.commit(root, message="Initial commit\n")
    builder.branch('main', commit)
    return {'commit': commit, 'tree': root, 'src': src, 'readme': readme}


@pytest.fixture
def history(builder):
    """
    History with one merge.
    
        A --- B --- M --- C     (main)
         \\         /
          `-- F --'             (feature)
    
    M has B as its first parent and F as its merge parent.
    """
    tree = builder.tree([('100644', 'file.txt', builder.blob("content\n"))])
    a = builder.commit(tree, message="A\n", timestamp=1600000000)
    b = builder.commit(tree, [a], message="B\n", timestamp=1600000100)
    f = builder.commit(tree, [a], message="F\n", timestamp=1600000200)
    m = builder.commit(tree, [b, f], message="Merge feature\n", timestamp=1600000300)
    c = builder.commit(tree, [m], message="C\n", timestamp=1600000400)
    builder.branch('main', c)
    builder.branch('feature', f)
    return {'A': a, 'B': b, 'F': f, 'M': m, 'C': c}
