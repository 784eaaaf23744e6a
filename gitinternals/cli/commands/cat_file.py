"""Cat-file command - decode and show one object."""

import click
from gitinternals.core.errors import GitInternalsError
from gitinternals.core.objects import Blob, Tree, Commit
from gitinternals.cli.context import open_repository
from gitinternals.cli.output import error, heading, digest


def echo_text(text: str) -> None:
    """Echo stored text without doubling its trailing newline."""
    click.echo(text, nl=not text.endswith('\n'))


def render_object(obj) -> None:
    """Print a decoded object in cat-file layout."""
    if isinstance(obj, Blob):
        click.echo(heading("*BLOB*"))
        echo_text(obj.content)
    elif isinstance(obj, Tree):
        click.echo(heading("*TREE*"))
        for entry in obj.entries:
            click.echo(f"{entry.mode} {digest(entry.digest)} {entry.filename}")
    elif isinstance(obj, Commit):
        click.echo(heading("*COMMIT*"))
        click.echo(f"tree: {obj.tree}")
        if obj.parent and obj.merge_parent:
            click.echo(f"parents: {obj.parent} | {obj.merge_parent}")
        elif obj.parent:
            click.echo(f"parents: {obj.parent}")
        click.echo(f"author: {obj.author}")
        click.echo(f"committer: {obj.committer}")
        click.echo("commit message:")
        echo_text(obj.message)
    else:
        raise TypeError(f"Unhandled object type: {type(obj).__name__}")


@click.command('cat-file')
@click.option('-t', '--type', 'show_type', is_flag=True, help='Show object type')
@click.option('-s', '--size', 'show_size', is_flag=True, help='Show declared object size')
@click.argument('object_digest')
@click.pass_context
def cat_file_cmd(ctx, show_type, show_size, object_digest):
    """
    Decode and show a Git object.
    
    OBJECT_DIGEST may be abbreviated to at least 4 characters.
    
    Examples:
        gitinternals cat-file 0eee6a98          # Show decoded content
        gitinternals cat-file -t 0eee6a98       # Show object type
        gitinternals cat-file -s 0eee6a98       # Show size from header
    """
    repo = open_repository(ctx)
    
    try:
        full_digest = repo.resolve_prefix(object_digest)
        obj = repo.read_object(full_digest)
    except GitInternalsError as e:
        click.echo(error(f"cat-file failed: {e}"), err=True)
        raise click.Abort()
    
    if show_type:
        click.echo(obj.type)
        return
    
    if show_size:
        click.echo(obj.length)
        return
    
    render_object(obj)
