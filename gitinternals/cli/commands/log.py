"""Log command - show first-parent history of a branch."""

import click
from gitinternals.core.errors import GitInternalsError
from gitinternals.operations.log import HistoryWalker
from gitinternals.cli.context import open_repository, cli_config
from gitinternals.cli.commands.cat_file import echo_text
from gitinternals.cli.output import error, digest


def display_entry(entry) -> None:
    """Print one log entry."""
    commit = entry.commit
    merged = " (merged)" if entry.is_merged_in else ""
    click.echo(f"Commit: {digest(commit.digest)}{merged}")
    click.echo(str(commit.committer))
    echo_text(commit.message)


@click.command('log')
@click.option('-n', '--max-count', type=int, default=None, help='Limit the number of commits shown')
@click.argument('branch')
@click.pass_context
def log_cmd(ctx, max_count, branch):
    """
    Show commit history of BRANCH.
    
    Follows first parents from the branch head to the root commit. A
    merge commit is followed by the commit it merged in, marked
    "(merged)".
    
    Examples:
        gitinternals log main              # Full history of main
        gitinternals log -n 5 feature      # Last 5 entries of feature
    """
    repo = open_repository(ctx)
    
    if max_count is None:
        try:
            max_count = cli_config(ctx).get_int('log', 'max_count')
        except ValueError as e:
            click.echo(error(str(e)), err=True)
            raise click.Abort()
    
    try:
        history = HistoryWalker(repo).walk_branch(branch, max_count)
    except GitInternalsError as e:
        click.echo(error(f"log failed: {e}"), err=True)
        raise click.Abort()
    
    for entry in history:
        display_entry(entry)
