"""Core functionality for gitinternals.

This module contains the core data structures:
- Git objects (Blob, Tree, Commit) and the loose-object decoder
- Repository access to the object store
- Reference lookup
- Configuration management
- Digest utilities

For history and tree traversal, see gitinternals.operations
"""

from gitinternals.core.errors import (GitInternalsError, NotFoundError, FormatError,
                                      UnknownTypeError, TypeMismatchError,
                                      AmbiguousDigestError)
from gitinternals.core.objects import (GitObject, Blob, Tree, TreeEntry, Commit,
                                       Contribution, ContributionRole, decode_object)
from gitinternals.core.repository import Repository
from gitinternals.core.hash import to_hex, to_bytes, is_digest
from gitinternals.core.refs import RefManager
from gitinternals.core.config import Config, get_config

__all__ = [
    'GitInternalsError',
    'NotFoundError',
    'FormatError',
    'UnknownTypeError',
    'TypeMismatchError',
    'AmbiguousDigestError',
    'GitObject',
    'Blob',
    'Tree',
    'TreeEntry',
    'Commit',
    'Contribution',
    'ContributionRole',
    'decode_object',
    'Repository',
    'RefManager',
    'Config',
    'get_config',
    'to_hex',
    'to_bytes',
    'is_digest',
]
