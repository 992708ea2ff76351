"""Shared test fixtures for mdxblog package."""

from pathlib import Path

import pytest
import yaml


def render_document(front_matter: dict, body: str = "Test content.") -> str:
    """Render an MDX document with a YAML front matter block."""
    fm_str = yaml.dump(front_matter, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{fm_str}---\n\n{body}\n"


@pytest.fixture
def posts_dir(tmp_path):
    """Provide an empty posts directory."""
    path = tmp_path / "content" / "posts"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_post(posts_dir):
    """Factory fixture for writing MDX posts into the posts directory."""
    def _write(
        filename: str = "test-post.mdx",
        slug: str | None = "test-post",
        title: str | None = "Test Post",
        published: str | None = "2024-01-01",
        body: str = "Test content.",
        extra_fm: dict | None = None,
    ) -> Path:
        fm: dict = {}
        if title is not None:
            fm["title"] = title
        if slug is not None:
            fm["slug"] = slug
        if published is not None:
            fm["publishedDate"] = published
        if extra_fm:
            fm.update(extra_fm)

        path = posts_dir / filename
        path.write_text(render_document(fm, body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def mock_site_root(tmp_path, posts_dir, monkeypatch):
    """Make tmp_path the detected site root."""
    from mdxblog.core import config

    config.get_site_root.cache_clear()
    monkeypatch.setattr(config, "get_site_root", lambda: tmp_path)
    return tmp_path
