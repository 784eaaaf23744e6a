"""gitinternals - read-only inspector for Git loose-object repositories."""

__version__ = '0.1.0'

from gitinternals.core.repository import Repository
from gitinternals.core.objects import GitObject, Blob, Tree, TreeEntry, Commit, Contribution

__all__ = [
    'Repository',
    'GitObject',
    'Blob',
    'Tree',
    'TreeEntry',
    'Commit',
    'Contribution',
]
