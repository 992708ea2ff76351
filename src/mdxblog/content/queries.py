"""Read-only queries over a locale's blog posts.

Every query loads the posts fresh from the ContentStore unless the service
was built with ``cache=True``, in which case loaded posts are reused until
the locale's files change on disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from mdxblog.content.frontmatter import Rejection
from mdxblog.content.locale import LocaleResolver
from mdxblog.content.models import BlogPost, Category
from mdxblog.content.scanner import ContentStore, ScanIssue
from mdxblog.core.config import SiteConfig, load_site_config

logger = logging.getLogger(__name__)


@dataclass
class _CacheEntry:
    signature: tuple
    posts: list[BlogPost]
    issues: list[ScanIssue]
    rejections: list[Rejection]


class BlogService:
    """Blog queries for one posts directory."""

    def __init__(self, store: ContentStore, cache: bool = False):
        self.store = store
        self.cache_enabled = cache
        self._cache: dict[str, _CacheEntry] = {}
        self.issues: list[ScanIssue] = []
        self.rejections: list[Rejection] = []

    @classmethod
    def from_config(cls, config: SiteConfig, cache: bool = False) -> BlogService:
        resolver = LocaleResolver(
            default_locale=config.default_locale,
            supported_locales=config.locales,
        )
        return cls(ContentStore(config.posts_dir, resolver=resolver), cache=cache)

    @property
    def diagnostics(self) -> list[ScanIssue | Rejection]:
        """Skipped files and rejected documents from the latest load."""
        return [*self.issues, *self.rejections]

    def _load(self, locale: str | None) -> list[BlogPost]:
        if not self.cache_enabled:
            posts = self.store.load_posts(locale)
            self.issues = list(self.store.issues)
            self.rejections = list(self.store.rejections)
            return posts

        key = self.store.resolver.resolve(locale).locale
        signature = self.store.content_signature(locale)
        entry = self._cache.get(key)
        if entry is None or entry.signature != signature:
            posts = self.store.load_posts(locale)
            entry = _CacheEntry(
                signature=signature,
                posts=posts,
                issues=list(self.store.issues),
                rejections=list(self.store.rejections),
            )
            self._cache[key] = entry
        else:
            logger.debug("Cache hit for locale %s", key)

        self.issues = list(entry.issues)
        self.rejections = list(entry.rejections)
        # Hand out copies so the cached posts stay untouched
        return [
            replace(post, categories=list(post.categories), tags=list(post.tags))
            for post in entry.posts
        ]

    def clear_cache(self) -> None:
        self._cache.clear()

    def list_all(self, locale: str | None = None) -> list[BlogPost]:
        """All posts of *locale*, newest first.

        The sort is stable, so posts sharing a date keep scan order.
        """
        posts = self._load(locale)
        return sorted(posts, key=lambda post: post.published_date, reverse=True)

    def get_by_slug(self, slug: str, locale: str | None = None) -> BlogPost | None:
        """Return the first post with *slug*, or None."""
        for post in self.list_all(locale):
            if post.slug == slug:
                return post
        return None

    def get_by_id(self, post_id: str, locale: str | None = None) -> BlogPost | None:
        return self.get_by_slug(post_id, locale)

    def list_by_category(self, name: str, locale: str | None = None) -> list[BlogPost]:
        """Posts filed under category *name* (case-insensitive), newest first."""
        return [post for post in self.list_all(locale) if post.has_category(name)]

    def list_by_tag(self, tag: str, locale: str | None = None) -> list[BlogPost]:
        """Posts carrying *tag* (case-insensitive), newest first."""
        return [post for post in self.list_all(locale) if post.has_tag(tag)]

    def list_category_names(self, locale: str | None = None) -> list[str]:
        names = {cat for post in self._load(locale) for cat in post.categories}
        return sorted(names)

    def list_categories(self, locale: str | None = None) -> list[Category]:
        """Every category in use, sorted by name."""
        return [Category.from_name(name) for name in self.list_category_names(locale)]

    def list_tags(self, locale: str | None = None) -> list[str]:
        """Every tag in use, sorted."""
        return sorted({tag for post in self._load(locale) for tag in post.tags})


def open_blog(site_root: Path | None = None, cache: bool = False) -> BlogService:
    """Build a BlogService for a site, reading its ``mdxblog.yaml``.

    Args:
        site_root: Site root (auto-detected if not provided)
        cache: Reuse loaded posts until the files change

    Raises:
        FileNotFoundError: If no site root can be found
    """
    return BlogService.from_config(load_site_config(site_root), cache=cache)
