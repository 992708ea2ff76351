"""
MDX content scanner.

Scans the posts directory for one locale's documents and parses their
front matter and body.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mdxblog.content.frontmatter import (
    FrontMatterError,
    Rejection,
    split_front_matter,
    validate_frontmatter,
)
from mdxblog.content.locale import LocaleResolver, LocaleRule
from mdxblog.content.models import BlogPost

logger = logging.getLogger(__name__)


@dataclass
class RawDocument:
    """A parsed but not yet validated content file."""

    path: Path
    front_matter: dict[str, Any] = field(default_factory=dict)
    body: str = ""


@dataclass
class ScanIssue:
    """A file that could not be read or parsed."""

    path: Path
    reason: str

    def describe(self) -> str:
        return f"Skipped {self.path}: {self.reason}"


class ContentStore:
    """Reads per-locale MDX documents from a posts directory.

    Nothing is cached: every call re-reads the directory, so results always
    reflect what is on disk.
    """

    def __init__(self, posts_dir: Path, resolver: LocaleResolver | None = None):
        """Initialize store.

        Args:
            posts_dir: Directory holding the ``.mdx`` documents
            resolver: Locale resolver (default: ko default, ko/en supported)
        """
        self.posts_dir = Path(posts_dir)
        self.resolver = resolver or LocaleResolver()
        self.issues: list[ScanIssue] = []
        self.rejections: list[Rejection] = []

    def list_files(self, locale: str | None = None) -> list[Path]:
        """List the files belonging to *locale*, sorted by name.

        An absent or unreadable directory yields an empty list.
        """
        rule = self.resolver.resolve(locale)
        return list(self._iter_files(rule))

    def _iter_files(self, rule: LocaleRule) -> Iterator[Path]:
        try:
            entries = sorted(self.posts_dir.iterdir())
        except OSError as e:
            logger.debug("Cannot list %s: %s", self.posts_dir, e)
            return

        for path in entries:
            if path.name.startswith("."):
                continue
            # Skip symlinks to prevent traversal outside content directory
            try:
                if path.is_symlink() or not path.is_file():
                    continue
            except OSError as e:
                logger.debug("Cannot stat %s: %s", path, e)
                continue
            if rule.matches(path.name):
                yield path

    def scan(self, locale: str | None = None) -> list[RawDocument]:
        """Read and split every document of *locale*.

        Files that cannot be read or parsed are logged, recorded in
        ``issues`` and skipped.

        Raises:
            UnsupportedLocaleError: If the resolver rejects the locale
        """
        self.issues = []
        self.rejections = []

        documents = []
        for path in self.list_files(locale):
            doc = self._read_document(path)
            if doc is not None:
                documents.append(doc)

        logger.debug(
            "Scanned %d document(s) for locale %s in %s",
            len(documents),
            locale or self.resolver.default_locale,
            self.posts_dir,
        )
        return documents

    def _read_document(self, path: Path) -> RawDocument | None:
        try:
            text = path.read_text(encoding="utf-8")
            front_matter, body = split_front_matter(text)
        except (OSError, UnicodeDecodeError, FrontMatterError) as e:
            issue = ScanIssue(path=path, reason=str(e))
            logger.warning(issue.describe())
            self.issues.append(issue)
            return None

        return RawDocument(path=path, front_matter=front_matter, body=body)

    def load_posts(self, locale: str | None = None) -> list[BlogPost]:
        """Scan *locale* and materialize every valid document, in scan order.

        Documents failing validation are logged, recorded in ``rejections``
        and skipped.
        """
        posts = []
        for doc in self.scan(locale):
            result = validate_frontmatter(doc.front_matter, doc.body, path=doc.path)
            if isinstance(result, Rejection):
                logger.warning(result.describe())
                self.rejections.append(result)
                continue
            posts.append(result.to_post(doc.body, source_path=doc.path))
        return posts

    def content_signature(self, locale: str | None = None) -> tuple:
        """Return a fingerprint of the current state of *locale*'s files.

        Combines the directory mtime with each file's name, mtime and size,
        so additions, removals and in-place edits all change it.
        """
        try:
            dir_mtime = self.posts_dir.stat().st_mtime_ns
        except OSError:
            return ()

        files = []
        for path in self.list_files(locale):
            try:
                stat = path.stat()
            except OSError:
                continue
            files.append((path.name, stat.st_mtime_ns, stat.st_size))
        return (dir_mtime, tuple(files))
