"""Shared state for CLI commands."""

import click

from gitinternals.core.config import Config
from gitinternals.core.repository import Repository
from gitinternals.cli.output import error


def open_repository(ctx: click.Context) -> Repository:
    """
    Open the repository selected by --git-dir or found from the cwd.

    Aborts the command if no git directory can be found.
    """
    git_dir = ctx.obj.get('git_dir') if ctx.obj else None

    if git_dir:
        repo = Repository(git_dir)
        if not Repository.is_git_dir(repo.git_dir):
            click.echo(error(f"Not a git directory: {repo.git_dir}"), err=True)
            raise click.Abort()
        return repo

    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a git repository (or any of the parent directories)"), err=True)
        raise click.Abort()
    return repo


def cli_config(ctx: click.Context) -> Config:
    """Return the Config loaded by the top-level command."""
    return ctx.obj['config']
