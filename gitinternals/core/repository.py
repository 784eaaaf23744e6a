"""Repository access for gitinternals."""

import logging
import zlib
from pathlib import Path
from typing import Optional

from .errors import AmbiguousDigestError, FormatError, NotFoundError, TypeMismatchError
from .objects import GitObject, Commit, Tree, decode_object

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 4


class Repository:
    """
    Read-only handle on a git directory.

    The git directory holds the loose object store, the refs and HEAD.
    Nothing is cached: every read goes back to disk.
    """

    def __init__(self, path: str = '.git'):
        """
        Initialize repository.

        Args:
            path: Path to the git directory (the one containing HEAD)
        """
        self.git_dir = Path(path).resolve()
        self.objects_dir = self.git_dir / 'objects'
        self.refs_dir = self.git_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.head_file = self.git_dir / 'HEAD'

        self._ref_manager = None

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @staticmethod
    def is_git_dir(path: Path) -> bool:
        """Check whether path looks like a git directory."""
        return (path / 'HEAD').is_file() and (path / 'objects').is_dir()

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find a git directory by searching up the directory tree.

        A directory matches if it is a git directory itself or holds
        one as ``.git``.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if cls.is_git_dir(current):
                return cls(str(current))

            git_dir = current / '.git'
            if cls.is_git_dir(git_dir):
                return cls(str(git_dir))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for an object.

        Objects are stored in subdirectories named by the first 2 characters
        of the digest, with the remaining 38 characters as the filename.

        Args:
            digest: 40-character hex digest

        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / digest[:2] / digest[2:]

    def read_raw(self, digest: str) -> bytes:
        """
        Read and inflate a loose object.

        Args:
            digest: 40-character hex digest

        Returns:
            bytes: Decompressed ``<type> <length>\\0<body>`` bytes

        Raises:
            NotFoundError: If the object file does not exist
            FormatError: If the file can't be read or is not a valid zlib stream
        """
        path = self.object_path(digest)
        logger.debug("Reading object %s from %s", digest, path)

        try:
            compressed = path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(f"Object {digest} not found at {path}")
        except OSError as e:
            raise FormatError(f"Object {digest} can't be read from {path}: {e}")

        try:
            return zlib.decompress(compressed)
        except zlib.error as e:
            raise FormatError(f"Object {digest} is corrupt: {e}")

    def read_object(self, digest: str) -> GitObject:
        """
        Read and decode an object.

        Args:
            digest: 40-character hex digest

        Returns:
            GitObject: Decoded object (Blob, Tree, or Commit)
        """
        return decode_object(digest, self.read_raw(digest))

    def read_commit(self, digest: str) -> Commit:
        """
        Read an object that must be a commit.

        Raises:
            TypeMismatchError: If the object is not a commit
        """
        obj = self.read_object(digest)
        if not isinstance(obj, Commit):
            raise TypeMismatchError(digest, 'commit', obj.type)
        return obj

    def read_tree(self, digest: str) -> Tree:
        """
        Read an object that must be a tree.

        Raises:
            TypeMismatchError: If the object is not a tree
        """
        obj = self.read_object(digest)
        if not isinstance(obj, Tree):
            raise TypeMismatchError(digest, 'tree', obj.type)
        return obj

    def object_exists(self, digest: str) -> bool:
        """
        Check if object exists in repository.

        Args:
            digest: 40-character hex digest

        Returns:
            bool: True if object exists
        """
        return self.object_path(digest).is_file()

    def resolve_prefix(self, prefix: str) -> str:
        """
        Expand an abbreviated digest to the full digest.

        Args:
            prefix: At least 4 hex characters of a digest

        Returns:
            str: Full 40-character digest

        Raises:
            FormatError: If the prefix is too short or not hex
            NotFoundError: If no object matches
            AmbiguousDigestError: If several objects match
        """
        prefix = prefix.strip().lower()
        if len(prefix) < MIN_PREFIX_LENGTH or any(c not in '0123456789abcdef' for c in prefix):
            raise FormatError(f"Invalid object name: {prefix!r}")

        if len(prefix) == 40:
            return prefix

        subdir = self.objects_dir / prefix[:2]
        matches = []
        if subdir.is_dir():
            for obj_file in subdir.iterdir():
                full_digest = prefix[:2] + obj_file.name
                if obj_file.is_file() and full_digest.startswith(prefix):
                    matches.append(full_digest)

        if not matches:
            raise NotFoundError(f"No object matches {prefix}")
        if len(matches) > 1:
            raise AmbiguousDigestError(
                f"Short digest {prefix} is ambiguous: {', '.join(sorted(matches))}"
            )

        logger.debug("Resolved %s to %s", prefix, matches[0])
        return matches[0]

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.git_dir})"
