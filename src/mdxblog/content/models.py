"""Blog domain records built from validated frontmatter."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

WORDS_PER_MINUTE = 200

CATEGORY_DESCRIPTIONS = {
    "development": "Software development tutorials and best practices",
    "react": "React framework guides and patterns",
    "typescript": "TypeScript tips, tricks, and advanced features",
    "nextjs": "Next.js tutorials and application development",
    "javascript": "JavaScript fundamentals and modern features",
    "css": "CSS styling techniques and best practices",
    "tutorial": "Step-by-step tutorials and guides",
    "web development": "Web development articles and resources",
    "design": "Design principles and UI/UX best practices",
    "performance": "Web performance optimization techniques",
    "testing": "Testing strategies and tools",
    "devops": "DevOps practices and deployment strategies",
}


def slugify_name(name: str) -> str:
    """Lower-case a display name and join whitespace runs with hyphens.

    ``"Web Development"`` -> ``"web-development"``. Punctuation is kept, so
    ``"Next.js"`` stays ``"next.js"``.
    """
    return re.sub(r"\s+", "-", name.strip().lower())


def calculate_read_time(body: str) -> int:
    """Estimate reading time in minutes at 200 words per minute (minimum 1)."""
    words = len(body.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def parse_published_date(value: Any) -> datetime | None:
    """Parse a frontmatter date into a naive datetime.

    Accepts ISO 8601 strings (date or date-time, with optional ``Z`` or
    offset) as well as the ``date``/``datetime`` objects YAML produces for
    unquoted dates. Aware values are converted to UTC and made naive so
    every post sorts on one timeline.

    Returns:
        The parsed datetime, or None if the value is not a date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            return None
    return parsed


def describe_category(name: str) -> str:
    """Return the blurb for a category, falling back to a generic one."""
    return CATEGORY_DESCRIPTIONS.get(name.lower(), f"Articles about {name}")


@dataclass(frozen=True)
class Author:
    """Post author, embedded in a post's frontmatter."""

    id: str = ""
    name: str = ""
    avatar: str = ""
    bio: str = ""

    @classmethod
    def from_name(cls, name: str, avatar: str = "", bio: str = "") -> Author:
        return cls(id=slugify_name(name), name=name, avatar=avatar, bio=bio)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "avatar": self.avatar, "bio": self.bio}


@dataclass(frozen=True)
class Category:
    """A category derived from the posts that use it."""

    id: str
    name: str
    slug: str
    description: str

    @classmethod
    def from_name(cls, name: str) -> Category:
        slug = slugify_name(name)
        return cls(id=slug, name=name, slug=slug, description=describe_category(name))

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
        }


@dataclass
class BlogPost:
    """A published blog post for one locale."""

    slug: str
    title: str
    published_date: datetime
    author: Author = field(default_factory=Author)
    excerpt: str = ""
    content: str = ""
    featured_image: str = ""
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    read_time: int = 1
    source_path: Path | None = None

    @property
    def id(self) -> str:
        # Posts are keyed by slug
        return self.slug

    def has_category(self, name: str) -> bool:
        """Case-insensitive exact match against the post's categories."""
        wanted = name.lower()
        return any(cat.lower() == wanted for cat in self.categories)

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive exact match against the post's tags."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def to_dict(self, include_content: bool = True) -> dict[str, Any]:
        """Serialize using the content format's field names."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "author": self.author.to_dict(),
            "publishedDate": self.published_date.isoformat(),
            "excerpt": self.excerpt,
            "featuredImage": self.featured_image,
            "categories": list(self.categories),
            "tags": list(self.tags),
            "readTime": self.read_time,
        }
        if include_content:
            data["content"] = self.content
        if self.source_path is not None:
            data["sourcePath"] = str(self.source_path)
        return data
