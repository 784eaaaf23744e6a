"""Repository object store tests."""

import zlib

import pytest
from gitinternals.core.errors import (AmbiguousDigestError, FormatError, NotFoundError,
                                      TypeMismatchError)
from gitinternals.core.objects import Blob, Commit, Tree
from gitinternals.core.repository import Repository


def test_object_path(repo):
    """Test objects fan out by the first two hex characters."""
    digest = '0eee6a98471a350b2c2316313114185ecaf82f0e'
    path = repo.object_path(digest)
    assert path == repo.git_dir / 'objects' / '0e' / 'ee6a98471a350b2c2316313114185ecaf82f0e'


def test_read_raw(repo, builder):
    """Test raw reads return the inflated object."""
    digest = builder.blob("hello\n")
    assert repo.read_raw(digest) == b'blob 6\0hello\n'


def test_read_missing_object(repo):
    """Test a missing object raises NotFoundError with the digest."""
    with pytest.raises(NotFoundError, match='a' * 40):
        repo.read_object('a' * 40)


def test_read_corrupt_object(repo):
    """Test undecompressable data raises FormatError."""
    digest = 'b' * 40
    path = repo.object_path(digest)
    path.parent.mkdir(parents=True)
    path.write_bytes(b'not zlib at all')
    
    with pytest.raises(FormatError, match=digest):
        repo.read_raw(digest)


def test_read_truncated_object(repo, builder):
    """Test a truncated zlib stream raises FormatError."""
    digest = builder.blob("some longer content " * 10)
    path = repo.object_path(digest)
    path.write_bytes(path.read_bytes()[:-6])
    
    with pytest.raises(FormatError):
        repo.read_object(digest)


def test_read_object_types(repo, project):
    """Test each variant decodes to its class."""
    assert isinstance(repo.read_object(project['commit']), Commit)
    assert isinstance(repo.read_object(project['tree']), Tree)
    assert isinstance(repo.read_object(project['readme']), Blob)


def test_read_is_repeatable(repo, project):
    """Test reading the same digest twice gives equal objects."""
    for digest in (project['commit'], project['tree'], project['readme']):
        assert repo.read_object(digest) == repo.read_object(digest)


def test_read_commit_type_mismatch(repo, project):
    """Test read_commit rejects other variants."""
    with pytest.raises(TypeMismatchError) as exc_info:
        repo.read_commit(project['tree'])
    assert exc_info.value.digest == project['tree']
    assert exc_info.value.actual == 'tree'


def test_read_tree_type_mismatch(repo, project):
    """Test read_tree rejects other variants."""
    with pytest.raises(TypeMismatchError):
        repo.read_tree(project['readme'])


def test_object_exists(repo, project):
    """Test existence checks."""
    assert repo.object_exists(project['commit'])
    assert not repo.object_exists('c' * 40)


def test_resolve_prefix(repo, project):
    """Test abbreviated digests expand."""
    assert repo.resolve_prefix(project['commit'][:8]) == project['commit']
    assert repo.resolve_prefix(project['commit'].upper()) == project['commit']


def test_resolve_prefix_not_found(repo):
    """Test unknown prefixes fail."""
    with pytest.raises(NotFoundError):
        repo.resolve_prefix('deadbeef')


def test_resolve_prefix_too_short(repo):
    """Test prefixes under four characters fail."""
    with pytest.raises(FormatError):
        repo.resolve_prefix('ab')


def test_resolve_prefix_ambiguous(repo):
    """Test a prefix matching two objects fails."""
    subdir = repo.objects_dir / 'ab'
    subdir.mkdir()
    (subdir / ('cd' + '0' * 36)).write_bytes(zlib.compress(b'blob 0\0'))
    (subdir / ('cd' + '1' * 36)).write_bytes(zlib.compress(b'blob 0\0'))
    
    with pytest.raises(AmbiguousDigestError):
        repo.resolve_prefix('abcd')


def test_find_repository_from_work_tree(builder, temp_dir):
    """Test discovery through a .git subdirectory."""
    nested = temp_dir / 'src' / 'pkg'
    nested.mkdir(parents=True)
    
    found = Repository.find_repository(str(nested))
    assert found is not None
    assert found.git_dir == builder.git_dir.resolve()


def test_find_repository_git_dir_itself(builder):
    """Test discovery when starting inside the git directory."""
    found = Repository.find_repository(str(builder.git_dir))
    assert found.git_dir == builder.git_dir.resolve()


def test_find_repository_none(tmp_path):
    """Test no repository found."""
    assert Repository.find_repository(str(tmp_path)) is None


def test_read_unreadable_object_path(repo):
    """Test a directory where an object file should be is a format error."""
    digest = 'c' * 40
    repo.object_path(digest).mkdir(parents=True)
    
    with pytest.raises(FormatError, match=digest):
        repo.read_raw(digest)
