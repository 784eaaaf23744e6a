"""Main CLI entry point for gitinternals."""

import logging

import click
from colorama import init

from gitinternals import __version__
from gitinternals.core.config import get_config
from gitinternals.cli.output import BANNER, error
from gitinternals.cli.commands import (cat_file_cmd, list_branches_cmd, log_cmd,
                                       commit_tree_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class GitInternalsGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GitInternalsGroup)
@click.version_option(version=__version__)
@click.option('--git-dir', type=click.Path(file_okay=False), default=None,
              help='Path to the .git directory (default: search from cwd)')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, git_dir, verbose):
    """Inspect the objects, branches and history of a Git repository."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    
    config = get_config()
    try:
        color = config.get_bool('output', 'color')
    except ValueError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
    if color is not None:
        ctx.color = color
    
    ctx.ensure_object(dict)
    ctx.obj['git_dir'] = git_dir
    ctx.obj['config'] = config


# Register commands
cli.add_command(cat_file_cmd)
cli.add_command(list_branches_cmd)
cli.add_command(log_cmd)
cli.add_command(commit_tree_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
