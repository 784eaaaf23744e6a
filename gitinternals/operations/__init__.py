"""Operations module for traversals over the object graph.

This module contains:
- First-parent history walking with merge annotation
- Tree flattening into file paths
"""

from gitinternals.operations.log import HistoryWalker, LogEntry
from gitinternals.operations.tree import TreeFlattener

__all__ = [
    'HistoryWalker', 'LogEntry',
    'TreeFlattener',
]
