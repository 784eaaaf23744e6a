"""First-parent commit history with merge annotation."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from gitinternals.core.objects import Commit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEntry:
    """A commit as it appears in a log, flagged if it was merged in."""

    commit: Commit
    is_merged_in: bool = False


class HistoryWalker:
    """
    Walks commit history along first parents.

    When a commit has a merge parent, that single commit is emitted
    right after the merge, flagged as merged in. The merged branch's own
    ancestry is not followed.
    """

    def __init__(self, repo):
        self.repo = repo

    def walk(self, start_digest: str, max_count: Optional[int] = None) -> List[LogEntry]:
        """
        Walk history from a commit down to the root.

        Args:
            start_digest: Digest of the commit to start from
            max_count: Stop after this many entries

        Returns:
            Log entries, newest first
        """
        history: List[LogEntry] = []

        def full() -> bool:
            return max_count is not None and len(history) >= max_count

        if max_count is not None and max_count <= 0:
            return history

        commit = self.repo.read_commit(start_digest)
        history.append(LogEntry(commit))

        while commit.parent and not full():
            if commit.merge_parent:
                logger.debug("Commit %s merges in %s", commit.digest, commit.merge_parent)
                history.append(LogEntry(self.repo.read_commit(commit.merge_parent), True))
                if full():
                    break

            commit = self.repo.read_commit(commit.parent)
            history.append(LogEntry(commit))

        logger.debug("Walked %d commits from %s", len(history), start_digest)
        return history

    def walk_branch(self, name: str, max_count: Optional[int] = None) -> List[LogEntry]:
        """
        Walk history from the head of a branch.

        Args:
            name: Branch name
            max_count: Stop after this many entries

        Returns:
            Log entries, newest first
        """
        return self.walk(self.repo.refs.resolve_branch_head(name), max_count)
