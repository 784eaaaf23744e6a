"""Commit-tree command - list every file in a commit."""

import click
from gitinternals.core.errors import GitInternalsError
from gitinternals.operations.tree import TreeFlattener
from gitinternals.cli.context import open_repository, cli_config
from gitinternals.cli.output import error


@click.command('commit-tree')
@click.option('-j', '--jobs', type=click.IntRange(min=1), default=None,
              help='Threads used to decode sibling objects')
@click.argument('commit_digest')
@click.pass_context
def commit_tree_cmd(ctx, jobs, commit_digest):
    """
    List the file paths in the tree of COMMIT_DIGEST, in tree order.
    
    Examples:
        gitinternals commit-tree 0eee6a98        # List files
        gitinternals commit-tree -j 4 0eee6a98   # Decode with 4 threads
    """
    repo = open_repository(ctx)
    
    if jobs is None:
        try:
            jobs = cli_config(ctx).get_int('flatten', 'workers', 1)
        except ValueError as e:
            click.echo(error(str(e)), err=True)
            raise click.Abort()
    
    try:
        full_digest = repo.resolve_prefix(commit_digest)
        files = TreeFlattener(repo, workers=max(jobs, 1)).flatten(full_digest)
    except GitInternalsError as e:
        click.echo(error(f"commit-tree failed: {e}"), err=True)
        raise click.Abort()
    
    for path in files:
        click.echo(path)
