"""Helpers shared by the CLI command groups."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from mdxblog.content.queries import BlogService, open_blog

console = Console()


def root_from(obj) -> Path | None:
    """Return the --root override from the click context object, if any."""
    return getattr(obj, "root", None) if obj else None


def open_blog_or_exit(obj) -> BlogService:
    """Open the site's BlogService, exiting with status 1 if there is no site."""
    try:
        return open_blog(root_from(obj))
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def print_diagnostics(service: BlogService) -> None:
    """Print a one-line summary of files skipped by the latest load."""
    count = len(service.diagnostics)
    if count:
        console.print(
            f"[yellow]{count} file(s) skipped. "
            f"Run 'mdxblog posts check' for details.[/yellow]"
        )
