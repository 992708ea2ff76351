"""
Front matter splitting and validation.

Splits the leading YAML block off an MDX document and checks it against the
post schema before it becomes a BlogPost.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from mdxblog.content.models import (
    Author,
    BlogPost,
    calculate_read_time,
    parse_published_date,
)

FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)??---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL,
)

class FrontMatterError(ValueError):
    """Raised when a document's front matter block cannot be decoded."""


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a document into its front matter mapping and body.

    The body is returned verbatim, exactly as it follows the closing
    delimiter.

    Raises:
        FrontMatterError: If there is no front matter block, the YAML is
            malformed, or it does not decode to a mapping
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    match = FRONT_MATTER_RE.match(text)
    if not match:
        raise FrontMatterError("no front matter block")

    fm_text = match.group(1) or ""
    body = match.group(2)

    try:
        loaded = yaml.safe_load(fm_text)
    except (yaml.YAMLError, ValueError) as e:
        # Out-of-range timestamps surface as ValueError from the constructor
        raise FrontMatterError(f"YAML error: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise FrontMatterError(
            f"front matter must be a mapping, got {type(loaded).__name__}"
        )
    return loaded, body


@dataclass
class Rejection:
    """A document that failed validation."""

    path: Path | None
    missing: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)

    @property
    def fields(self) -> list[str]:
        return self.missing + self.invalid

    def describe(self) -> str:
        parts = []
        if self.missing:
            parts.append(f"missing {', '.join(self.missing)}")
        if self.invalid:
            parts.append(f"invalid {', '.join(self.invalid)}")
        where = f" in {self.path}" if self.path else ""
        return f"Rejected front matter{where}: {'; '.join(parts)}"


@dataclass
class ValidatedFrontmatter:
    """Front matter with every field present and typed."""

    title: str
    slug: str
    published_date: datetime
    excerpt: str = ""
    featured_image: str = ""
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    read_time: int = 1
    author: Author = field(default_factory=Author)

    def to_post(self, body: str, source_path: Path | None = None) -> BlogPost:
        return BlogPost(
            slug=self.slug,
            title=self.title,
            published_date=self.published_date,
            author=self.author,
            excerpt=self.excerpt,
            content=body,
            featured_image=self.featured_image,
            categories=list(self.categories),
            tags=list(self.tags),
            read_time=self.read_time,
            source_path=source_path,
        )


def _text(value: Any) -> str | None:
    """Coerce a scalar to a stripped string; None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float)):
        return str(value).strip()
    return None


def _optional_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def _read_time(value: Any) -> int | None:
    # bool is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value < 1:
        return None
    return value


def _author(value: Any) -> Author | None:
    if not isinstance(value, dict):
        return None
    name = _text(value.get("name"))
    if not name:
        return None
    return Author.from_name(
        name,
        avatar=_optional_text(value.get("avatar")),
        bio=_optional_text(value.get("bio")),
    )


def validate_frontmatter(
    front_matter: dict[str, Any],
    body: str = "",
    path: Path | None = None,
) -> ValidatedFrontmatter | Rejection:
    """Check a front matter mapping and fill in defaults.

    Args:
        front_matter: Decoded front matter
        body: Document body, used to derive readTime when it is absent
        path: Source file, carried into the rejection for diagnostics

    Returns:
        ValidatedFrontmatter, or a Rejection listing every bad field
    """
    rejection = Rejection(path=path)

    title = slug = None
    for key in ("title", "slug"):
        raw = front_matter.get(key)
        value = _text(raw)
        if raw is None or value == "":
            rejection.missing.append(key)
        elif value is None:
            rejection.invalid.append(key)
        elif key == "title":
            title = value
        else:
            slug = value

    raw_date = front_matter.get("publishedDate")
    published_date = parse_published_date(raw_date)
    if raw_date is None or raw_date == "":
        rejection.missing.append("publishedDate")
    elif published_date is None:
        rejection.invalid.append("publishedDate")

    author = Author()
    if front_matter.get("author") is not None:
        parsed_author = _author(front_matter["author"])
        if parsed_author is None:
            rejection.invalid.append("author.name")
        else:
            author = parsed_author

    if rejection.fields:
        return rejection

    read_time = _read_time(front_matter.get("readTime"))
    if read_time is None:
        read_time = calculate_read_time(body)

    return ValidatedFrontmatter(
        title=title,
        slug=slug,
        published_date=published_date,
        excerpt=_optional_text(front_matter.get("excerpt")),
        featured_image=_optional_text(front_matter.get("featuredImage")),
        categories=_string_list(front_matter.get("categories")),
        tags=_string_list(front_matter.get("tags")),
        read_time=read_time,
        author=author,
    )
