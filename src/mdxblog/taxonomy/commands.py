"""CLI commands for the category and tag taxonomies.

Both lists are derived from the posts of one locale.
"""

from __future__ import annotations

import json as json_module
from collections import Counter

import click
from rich.console import Console
from rich.table import Table

from mdxblog.content.locale import UnsupportedLocaleError
from mdxblog.core.cli_helpers import open_blog_or_exit, print_diagnostics

console = Console()


@click.group(name="taxonomy")
def taxonomy() -> None:
    """Categories and tags in use."""
    pass


@taxonomy.command(name="categories")
@click.option("-l", "--locale", default=None, help="Locale to read")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def categories_cmd(obj, locale: str | None, as_json: bool) -> None:
    """List categories with their descriptions and post counts."""
    service = open_blog_or_exit(obj)

    try:
        posts = service.list_all(locale)
        categories = service.list_categories(locale)
    except UnsupportedLocaleError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    counts = Counter(cat.lower() for post in posts for cat in set(post.categories))

    if as_json:
        output = [
            {**category.to_dict(), "count": counts[category.name.lower()]}
            for category in categories
        ]
        click.echo(json_module.dumps(output, indent=2, ensure_ascii=False))
        return

    if not categories:
        console.print("[yellow]No categories found.[/yellow]")
        print_diagnostics(service)
        return

    table = Table(title=f"Categories ({len(categories)})")
    table.add_column("Name", style="cyan")
    table.add_column("Slug", style="green")
    table.add_column("Posts", justify="right")
    table.add_column("Description", style="dim")

    for category in categories:
        table.add_row(
            category.name,
            category.slug,
            str(counts[category.name.lower()]),
            category.description,
        )

    console.print(table)
    print_diagnostics(service)


@taxonomy.command(name="tags")
@click.option("-l", "--locale", default=None, help="Locale to read")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def tags_cmd(obj, locale: str | None, as_json: bool) -> None:
    """List tags in use."""
    service = open_blog_or_exit(obj)

    try:
        tags = service.list_tags(locale)
    except UnsupportedLocaleError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if as_json:
        click.echo(json_module.dumps(tags, indent=2, ensure_ascii=False))
        return

    if not tags:
        console.print("[yellow]No tags found.[/yellow]")
        print_diagnostics(service)
        return

    console.print(f"[bold]Tags ({len(tags)})[/bold]")
    for tag in tags:
        console.print(f"  {tag}")
    print_diagnostics(service)
