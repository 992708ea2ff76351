"""CLI commands for blog posts.

Read-only views over the MDX posts directory, plus a scaffold command for
new documents.
"""

from __future__ import annotations

import json as json_module
import re
from datetime import datetime
from typing import NoReturn

import click
from rich.console import Console
from rich.table import Table

from mdxblog.content.locale import UnsupportedLocaleError
from mdxblog.core.cli_helpers import open_blog_or_exit, print_diagnostics

console = Console()

locale_option = click.option(
    "-l", "--locale", default=None, help="Locale to read (default: site default)"
)


def _slugify(title: str) -> str:
    """Convert a title to a URL-friendly slug.

    Lowercase, replace spaces/special chars with hyphens, collapse runs of
    hyphens, and strip leading/trailing hyphens.
    """
    slug = title.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    raise SystemExit(1)


@click.group(name="posts")
def posts() -> None:
    """List, inspect and validate blog posts."""
    pass


# ---------------------------------------------------------------------------
# mdxblog posts list
# ---------------------------------------------------------------------------


@posts.command(name="list")
@locale_option
@click.option("-c", "--category", default=None, help="Only posts in this category")
@click.option("-t", "--tag", default=None, help="Only posts with this tag")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON array")
@click.pass_obj
def list_posts(
    obj,
    locale: str | None,
    category: str | None,
    tag: str | None,
    as_json: bool,
) -> None:
    """List posts, newest first."""
    service = open_blog_or_exit(obj)

    try:
        if category:
            items = service.list_by_category(category, locale)
        else:
            items = service.list_all(locale)
    except UnsupportedLocaleError as e:
        _fail(str(e))

    if tag:
        items = [post for post in items if post.has_tag(tag)]

    if as_json:
        output = [post.to_dict(include_content=False) for post in items]
        click.echo(json_module.dumps(output, indent=2, ensure_ascii=False))
        return

    if not items:
        console.print("[yellow]No posts found matching criteria.[/yellow]")
        print_diagnostics(service)
        return

    table = Table(title=f"Posts ({len(items)})")
    table.add_column("Date", style="cyan", width=12)
    table.add_column("Slug", style="green")
    table.add_column("Title", no_wrap=False)
    table.add_column("Categories", style="dim")
    table.add_column("Min", justify="right")

    for post in items:
        table.add_row(
            post.published_date.strftime("%Y-%m-%d"),
            post.slug,
            post.title,
            ", ".join(post.categories),
            str(post.read_time),
        )

    console.print(table)
    print_diagnostics(service)


# ---------------------------------------------------------------------------
# mdxblog posts show
# ---------------------------------------------------------------------------


@posts.command(name="show")
@click.argument("slug")
@locale_option
@click.option("--body", "show_body", is_flag=True, help="Print the document body")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show_post(
    obj, slug: str, locale: str | None, show_body: bool, as_json: bool
) -> None:
    """Show a single post by slug."""
    service = open_blog_or_exit(obj)

    try:
        post = service.get_by_slug(slug, locale)
    except UnsupportedLocaleError as e:
        _fail(str(e))

    if post is None:
        _fail(f"Post not found: {slug}")

    if as_json:
        click.echo(
            json_module.dumps(
                post.to_dict(include_content=show_body), indent=2, ensure_ascii=False
            )
        )
        return

    console.print(f"[bold]{post.title}[/bold]")
    console.print(f"  Slug:       {post.slug}")
    console.print(f"  Published:  {post.published_date.isoformat()}")
    if post.author.name:
        console.print(f"  Author:     {post.author.name}")
    if post.categories:
        console.print(f"  Categories: {', '.join(post.categories)}")
    if post.tags:
        console.print(f"  Tags:       {', '.join(post.tags)}")
    console.print(f"  Read time:  {post.read_time} min")
    if post.excerpt:
        console.print(f"  Excerpt:    {post.excerpt}")
    if post.source_path:
        console.print(f"  [dim]{post.source_path}[/dim]")

    if show_body:
        console.print()
        click.echo(post.content)


# ---------------------------------------------------------------------------
# mdxblog posts check
# ---------------------------------------------------------------------------


@posts.command(name="check")
@locale_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def check_posts(obj, locale: str | None, as_json: bool) -> None:
    """Report files that are skipped when loading posts.

    Exits with status 1 if any file is unreadable or has invalid front matter.
    """
    service = open_blog_or_exit(obj)

    try:
        loaded = service.list_all(locale)
    except UnsupportedLocaleError as e:
        _fail(str(e))

    problems = [
        {"path": str(issue.path), "kind": "unreadable", "detail": issue.reason}
        for issue in service.issues
    ]
    problems.extend(
        {
            "path": str(rejection.path),
            "kind": "invalid",
            "detail": ", ".join(rejection.fields),
        }
        for rejection in service.rejections
    )

    if as_json:
        click.echo(
            json_module.dumps(
                {"loaded": len(loaded), "problems": problems},
                indent=2,
                ensure_ascii=False,
            )
        )
    elif not problems:
        console.print(f"[green]All {len(loaded)} post(s) are valid.[/green]")
    else:
        table = Table(title=f"Skipped Files ({len(problems)})")
        table.add_column("File", style="cyan")
        table.add_column("Problem", style="yellow")
        table.add_column("Detail")
        for problem in problems:
            table.add_row(problem["path"], problem["kind"], problem["detail"])
        console.print(table)
        console.print(f"[dim]{len(loaded)} post(s) loaded.[/dim]")

    if problems:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# mdxblog posts new
# ---------------------------------------------------------------------------


@posts.command(name="new")
@click.option("--title", required=True, help="Post title")
@click.option("--slug", default=None, help="URL slug (auto-generated if omitted)")
@click.option("--date", default=None, help="Publish date YYYY-MM-DD (default: today)")
@click.option("-c", "--category", multiple=True, help="Category (can repeat)")
@click.option("-t", "--tag", multiple=True, help="Tag (can repeat)")
@click.option("--excerpt", default="", help="Card preview text")
@click.option("--author", "author_name", default=None, help="Author name")
@locale_option
@click.pass_obj
def new_post(
    obj,
    title: str,
    slug: str | None,
    date: str | None,
    category: tuple[str, ...],
    tag: tuple[str, ...],
    excerpt: str,
    author_name: str | None,
    locale: str | None,
) -> None:
    """Scaffold a new MDX post."""
    import frontmatter

    from mdxblog.content.models import parse_published_date

    service = open_blog_or_exit(obj)

    if slug is None:
        slug = _slugify(title)
    if not slug:
        _fail("Could not derive a slug from the title; pass --slug.")

    if date is None:
        date = datetime.now().strftime("%Y-%m-%d")
    elif parse_published_date(date) is None:
        raise click.BadParameter(f"Invalid date: {date}. Use YYYY-MM-DD.", param_hint="--date")

    try:
        rule = service.store.resolver.resolve(locale)
    except UnsupportedLocaleError as e:
        _fail(str(e))

    posts_dir = service.store.posts_dir
    target = posts_dir / rule.filename_for(slug)
    if target.exists():
        _fail(f"Post already exists: {target}")

    metadata: dict = {
        "title": title,
        "slug": slug,
        "publishedDate": date,
        "excerpt": excerpt,
        "featuredImage": "",
        "categories": list(category),
        "tags": list(tag),
    }
    if author_name:
        metadata["author"] = {"name": author_name, "avatar": "", "bio": ""}

    post = frontmatter.Post(f"# {title}\n", **metadata)

    posts_dir.mkdir(parents=True, exist_ok=True)
    target.write_text(frontmatter.dumps(post) + "\n", encoding="utf-8")

    console.print(f"[green]Created[/green] {target}")
