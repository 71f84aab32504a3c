"""Command-line interface for the JSON Key Filter."""

from pathlib import Path

import click

from . import __version__
from .config import configure_logging, load_config
from .errors import JsonKeyFilterError
from .io_utils import dumps_filtered
from .session import FilterSession


def _load(input_file: Path) -> FilterSession:
    try:
        return FilterSession.load_file(input_file)
    except JsonKeyFilterError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose: bool):
    """JSON Key Filter - keep only the keys you pick from a JSON document."""
    configure_logging("DEBUG" if verbose else None)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--json', 'as_json', is_flag=True, help='Print the index as a JSON list')
def keys(input_file: Path, as_json: bool):
    """List every key path of INPUT_FILE as an indented tree."""
    session = _load(input_file)
    if as_json:
        click.echo(dumps_filtered([entry.to_dict() for entry in session.entries]))
        return
    for entry in session.entries:
        click.echo(f"{'  ' * entry.depth}{entry.display_name}  ({entry.path})")


@main.command(name='filter')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--keep', '-k', multiple=True, help='Key path to keep; when given, only these subtrees are kept')
@click.option('--drop', '-d', multiple=True, help='Key path to remove together with its subtree')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), help='Output JSON file path')
def filter_command(input_file: Path, keep, drop, output):
    """Write INPUT_FILE reduced to the selected key paths."""
    session = _load(input_file)
    known = {entry.path for entry in session.entries}
    for path in (*keep, *drop):
        if path not in known:
            raise click.BadParameter(f"Unknown key path: {path}")

    if keep:
        session = session.deselect_all()
        for path in keep:
            if path not in session.selection:
                session = session.toggle(path)
    for path in drop:
        if path in session.selection:
            session = session.toggle(path)

    filtered = session.current_filtered()
    if filtered is None:
        raise click.ClickException("Nothing selected; no data to write.")

    text = dumps_filtered(filtered, load_config().indent)
    if output:
        output.write_text(text + "\n", encoding='utf-8')
        click.echo(f"Wrote filtered JSON to {output}", err=True)
    else:
        click.echo(text)


@main.command()
@click.option('--host', default=None, help='Server host name')
@click.option('--port', type=int, default=None, help='Server port')
def serve(host, port):
    """Launch the web UI."""
    from .ui import build_demo

    config = load_config()
    build_demo().launch(
        server_name=host or config.server_name,
        server_port=port or config.server_port,
    )


if __name__ == '__main__':
    main()
