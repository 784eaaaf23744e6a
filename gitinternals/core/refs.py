"""Reference lookup for gitinternals."""

import logging
import re
from typing import List

from .errors import FormatError, NotFoundError
from .hash import is_digest

logger = logging.getLogger(__name__)

_SYMBOLIC_HEAD = re.compile(r'^ref: refs/heads/(?P<branch>.+)$')


class RefManager:
    """
    Reads branch references and HEAD.

    Handles:
    - Symbolic HEAD (``ref: refs/heads/<name>``)
    - Branch references (refs/heads/*)
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.git_dir = repo.git_dir
        self.heads_dir = repo.heads_dir
        self.head_file = repo.head_file

    def get_current_branch(self) -> str:
        """
        Get the current branch name from HEAD.

        Returns:
            Branch name

        Raises:
            NotFoundError: If HEAD does not exist
            FormatError: If HEAD is not a symbolic branch reference
        """
        try:
            content = self.head_file.read_text()
        except FileNotFoundError:
            raise NotFoundError(f"HEAD not found at {self.head_file}")

        match = _SYMBOLIC_HEAD.match(content.rstrip('\r\n'))
        if not match:
            raise FormatError(f"Can't read current branch from {self.head_file}")
        return match.group('branch')

    def list_branches(self) -> List[str]:
        """
        List all branch names.

        Returns:
            Branch names sorted lexicographically; nested refs are
            joined with '/'
        """
        if not self.heads_dir.is_dir():
            return []

        branches = [
            path.relative_to(self.heads_dir).as_posix()
            for path in self.heads_dir.rglob('*')
            if path.is_file()
        ]
        return sorted(branches)

    def resolve_branch_head(self, name: str) -> str:
        """
        Read the head commit digest of a branch.

        Args:
            name: Branch name (e.g. 'main', 'feature/x')

        Returns:
            40-character hex digest

        Raises:
            NotFoundError: If the branch does not exist
            FormatError: If the ref file does not hold a digest
        """
        ref_path = self.heads_dir / name
        try:
            digest = ref_path.read_text().strip()
        except (FileNotFoundError, IsADirectoryError):
            raise NotFoundError(f"Branch {name!r} not found at {ref_path}")

        if not is_digest(digest):
            raise FormatError(f"Branch {name!r} does not point to a digest: {digest!r}")

        logger.debug("Branch %s is at %s", name, digest)
        return digest
