"""CLI commands for gitinternals."""

from gitinternals.cli.commands.cat_file import cat_file_cmd
from gitinternals.cli.commands.branch import list_branches_cmd
from gitinternals.cli.commands.log import log_cmd
from gitinternals.cli.commands.commit_tree import commit_tree_cmd

__all__ = ['cat_file_cmd', 'list_branches_cmd', 'log_cmd', 'commit_tree_cmd']
