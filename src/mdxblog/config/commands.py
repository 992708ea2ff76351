"""
Configuration CLI commands.

Shows the resolved site settings (root, posts directory, locales) and where
they come from.
"""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.table import Table

from mdxblog.core.cli_helpers import root_from
from mdxblog.core.config import (
    SITE_CONFIG_NAME,
    get_global_config_path,
    load_site_config,
)

console = Console()


@click.group(name="config")
def config() -> None:
    """Inspect site configuration."""
    pass


@config.command(name="show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show_config(obj, as_json: bool) -> None:
    """Show the resolved site configuration."""
    try:
        site = load_site_config(root_from(obj))
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    data = {
        "root": str(site.root),
        "posts_dir": str(site.posts_dir),
        "posts_dir_exists": site.posts_dir.is_dir(),
        "locales": list(site.locales),
        "default_locale": site.default_locale,
        "site_config": str(site.root / SITE_CONFIG_NAME),
        "global_config": str(get_global_config_path()),
    }

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title="mdxblog Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Site root", data["root"])
    posts_note = "" if data["posts_dir_exists"] else " [yellow](missing)[/yellow]"
    table.add_row("Posts directory", data["posts_dir"] + posts_note)
    table.add_row("Locales", ", ".join(data["locales"]))
    table.add_row("Default locale", data["default_locale"])
    table.add_row("Site config", data["site_config"])
    table.add_row("Global config", data["global_config"])

    console.print(table)
