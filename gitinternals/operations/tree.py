"""Flatten a commit's tree into file paths."""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional

from gitinternals.core.errors import TypeMismatchError
from gitinternals.core.objects import GITLINK_MODE, Blob, Tree

logger = logging.getLogger(__name__)


class TreeFlattener:
    """
    Lists every file reachable from a tree, in tree order.

    With more than one worker, the children of each tree are fetched
    through a thread pool. Results are consumed in entry order and the
    descent itself stays in the calling thread, so the output is the
    same as a serial walk.
    """

    def __init__(self, repo, workers: int = 1):
        """
        Initialize flattener.

        Args:
            repo: Repository instance
            workers: Maximum number of threads decoding sibling objects
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.repo = repo
        self.workers = workers

    def flatten(self, commit_digest: str) -> List[str]:
        """
        List file paths in a commit's root tree.

        Args:
            commit_digest: Digest of a commit

        Returns:
            '/'-joined file paths in tree order

        Raises:
            TypeMismatchError: If the digest is not a commit or its tree
                is not a tree
        """
        commit = self.repo.read_commit(commit_digest)
        return self.flatten_tree(commit.tree)

    def flatten_tree(self, tree_digest: str) -> List[str]:
        """List file paths under a tree object."""
        tree = self.repo.read_tree(tree_digest)
        files: List[str] = []

        if self.workers == 1:
            self._collect(tree, '', files, None)
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                self._collect(tree, '', files, executor)

        logger.debug("Flattened tree %s into %d files", tree_digest, len(files))
        return files

    def _collect(self, tree: Tree, prefix: str, files: List[str],
                 executor: Optional[Executor]) -> None:
        # Submodule commits live in another repository
        fetchable = [entry for entry in tree.entries if entry.mode != GITLINK_MODE]
        digests = [entry.digest for entry in fetchable]

        if executor is None:
            children = iter(map(self.repo.read_object, digests))
        else:
            children = iter(list(executor.map(self.repo.read_object, digests)))

        for entry in tree.entries:
            path = f"{prefix}/{entry.filename}" if prefix else entry.filename

            if entry.mode == GITLINK_MODE:
                files.append(path)
                continue

            child = next(children)
            if isinstance(child, Tree):
                logger.debug("Descending into %s", path)
                self._collect(child, path, files, executor)
            elif isinstance(child, Blob):
                files.append(path)
            else:
                raise TypeMismatchError(entry.digest, 'tree or blob', child.type)
