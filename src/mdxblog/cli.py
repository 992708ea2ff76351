"""
Main CLI dispatcher for mdxblog.

Usage:
    mdxblog posts [list|show|check|new]
    mdxblog taxonomy [categories|tags]
    mdxblog config show
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from mdxblog import __version__

console = Console()


class Context:
    """Shared context for all commands."""

    def __init__(self, verbose: bool = False, root: Path | None = None):
        self.verbose = verbose
        self.root = root
        self.console = console


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger = logging.getLogger("mdxblog")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="mdxblog")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Site root (default: auto-detect)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, root: Path | None) -> None:
    """MDX blog content tools.

    List, inspect and validate the posts of a multilingual MDX blog.
    """
    _configure_logging(verbose)
    ctx.obj = Context(verbose=verbose, root=root)


# Import and register command groups (imports after main definition intentional)
from mdxblog.config.commands import config  # noqa: E402
from mdxblog.posts.commands import posts  # noqa: E402
from mdxblog.taxonomy.commands import taxonomy  # noqa: E402

main.add_command(posts)
main.add_command(taxonomy)
main.add_command(config)


if __name__ == "__main__":
    main()
