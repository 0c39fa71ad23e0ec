"""Command-line interface."""

import logging
from pathlib import Path

import click

from ..config.settings import FindrrConfig, load_config
from ..core.predicates import PredicateSet
from ..core.walker import TreeWalker

logger = logging.getLogger(__name__)

USAGE = (
    "findrr PATH [-inum INODE_NUMBER] [-name NAME] [-size [-|=|+]SIZE] "
    "[-nlinks LINKS_NUMBER] [-exec PATH]"
)


def configure_logging(settings: FindrrConfig) -> None:
    """Set up root logging from the configuration."""
    if settings.log_file:
        logging.basicConfig(level=settings.log_level, filename=settings.log_file)
    else:
        logging.basicConfig(level=settings.log_level)


def collect_modifiers(
    inodes: tuple[str, ...],
    names: tuple[str, ...],
    sizes: tuple[str, ...],
    hardlinks: tuple[str, ...],
    executables: tuple[str, ...],
) -> list[tuple[str, str]]:
    """Flatten parsed options back into ``(flag, value)`` pairs."""
    modifiers = [("-inum", value) for value in inodes]
    modifiers += [("-name", value) for value in names]
    modifiers += [("-size", value) for value in sizes]
    modifiers += [("-nlinks", value) for value in hardlinks]
    modifiers += [("-exec", value) for value in executables]
    return modifiers


@click.command()
@click.argument(
    "path", required=False, type=click.Path(path_type=Path)
)
@click.option("-inum", "inodes", multiple=True, metavar="INODE_NUMBER",
              help="Match files with this inode number")
@click.option("-name", "names", multiple=True, metavar="NAME",
              help="Match files with exactly this name")
@click.option("-size", "sizes", multiple=True, metavar="[-|=|+]SIZE",
              help="Match files smaller than (-), equal to (=) or larger than (+) SIZE bytes")
@click.option("-nlinks", "hardlinks", multiple=True, metavar="LINKS_NUMBER",
              help="Match files with this many hard links")
@click.option("-exec", "executables", multiple=True, metavar="PATH",
              help="Run this program with each matching file as its argument")
def main(
    path: Path | None,
    inodes: tuple[str, ...],
    names: tuple[str, ...],
    sizes: tuple[str, ...],
    hardlinks: tuple[str, ...],
    executables: tuple[str, ...],
):
    """Search PATH recursively for regular files matching every given filter.

    Repeating a filter gives alternatives: -size -10 -size +100 matches files
    below 10 or above 100 bytes. Different filters must all hold. With -exec,
    the program is run once per match and the search waits for it.
    """
    if path is None:
        click.echo(f"Usage: {USAGE}")
        return
    if not path.exists():
        click.echo(f"File {path} isn't accessible.", err=True)
        return

    try:
        settings = load_config()
        configure_logging(settings)

        predicates = PredicateSet.from_modifiers(
            collect_modifiers(inodes, names, sizes, hardlinks, executables)
        )
        walker = TreeWalker(
            predicates,
            on_exec_error=settings.on_exec_error,
            report_unreadable=settings.report_unreadable,
        )
        walker.walk(path)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        logger.debug("Search aborted", exc_info=True)


if __name__ == "__main__":
    main()
