"""List-branches command - show local branches."""

import click
from colorama import Fore, Style
from gitinternals.core.errors import GitInternalsError
from gitinternals.cli.context import open_repository
from gitinternals.cli.output import error


@click.command('list-branches')
@click.pass_context
def list_branches_cmd(ctx):
    """
    List local branches, marking the current one with '*'.
    
    Examples:
        gitinternals list-branches
    """
    repo = open_repository(ctx)
    
    try:
        branches = repo.refs.list_branches()
        current = repo.refs.get_current_branch()
    except GitInternalsError as e:
        click.echo(error(f"list-branches failed: {e}"), err=True)
        raise click.Abort()
    
    for branch in branches:
        if branch == current:
            click.echo(f"* {Fore.GREEN}{branch}{Style.RESET_ALL}")
        else:
            click.echo(f"  {branch}")
