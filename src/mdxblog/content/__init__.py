"""
Content layer for the blog.

Provides tools for:
- Resolving which files belong to a locale
- Scanning MDX documents and splitting their front matter
- Validating front matter into BlogPost records
- Querying posts, categories and tags
"""

from mdxblog.content.frontmatter import (
    FrontMatterError,
    Rejection,
    ValidatedFrontmatter,
    split_front_matter,
    validate_frontmatter,
)
from mdxblog.content.locale import LocaleResolver, LocaleRule, UnsupportedLocaleError
from mdxblog.content.models import Author, BlogPost, Category, calculate_read_time
from mdxblog.content.queries import BlogService, open_blog
from mdxblog.content.scanner import ContentStore, RawDocument, ScanIssue

__all__ = [
    "Author",
    "BlogPost",
    "BlogService",
    "Category",
    "ContentStore",
    "FrontMatterError",
    "LocaleResolver",
    "LocaleRule",
    "RawDocument",
    "Rejection",
    "ScanIssue",
    "UnsupportedLocaleError",
    "ValidatedFrontmatter",
    "calculate_read_time",
    "open_blog",
    "split_front_matter",
    "validate_frontmatter",
]
