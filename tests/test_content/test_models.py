"""Tests for blog domain models and helpers."""

from datetime import date, datetime
from pathlib import Path

import pytest

from mdxblog.content.models import (
    Author,
    BlogPost,
    Category,
    calculate_read_time,
    describe_category,
    parse_published_date,
    slugify_name,
)


# ---------------------------------------------------------------------------
# calculate_read_time
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "words,expected",
    [(0, 1), (1, 1), (200, 1), (201, 2), (410, 3), (1000, 5)],
)
def test_calculate_read_time(words, expected):
    body = " ".join(["word"] * words)
    assert calculate_read_time(body) == expected


def test_calculate_read_time_counts_whitespace_runs_once():
    body = "one\n\ntwo\t\tthree   four"
    assert calculate_read_time(body) == 1
    assert len(body.split()) == 4


# ---------------------------------------------------------------------------
# slugify_name / describe_category
# ---------------------------------------------------------------------------

def test_slugify_name_joins_whitespace():
    assert slugify_name("Web Development") == "web-development"
    assert slugify_name("  Design   Systems ") == "design-systems"


def test_slugify_name_keeps_punctuation():
    assert slugify_name("Next.js") == "next.js"


def test_describe_category_known_name_is_case_insensitive():
    assert describe_category("React") == "React framework guides and patterns"
    assert describe_category("WEB DEVELOPMENT") == "Web development articles and resources"


def test_describe_category_fallback():
    assert describe_category("Design Systems") == "Articles about Design Systems"


# ---------------------------------------------------------------------------
# parse_published_date
# ---------------------------------------------------------------------------

def test_parse_date_only_string():
    assert parse_published_date("2024-01-15") == datetime(2024, 1, 15)


def test_parse_datetime_string():
    assert parse_published_date("2024-01-15T10:30:00") == datetime(2024, 1, 15, 10, 30)


def test_parse_zulu_string_normalizes_to_naive_utc():
    assert parse_published_date("2024-01-15T10:30:00Z") == datetime(2024, 1, 15, 10, 30)


def test_parse_offset_string_converts_to_utc():
    assert parse_published_date("2024-01-15T09:00:00+09:00") == datetime(2024, 1, 15, 0, 0)


def test_parse_yaml_date_object():
    assert parse_published_date(date(2024, 3, 1)) == datetime(2024, 3, 1)


def test_parse_datetime_object_passthrough():
    value = datetime(2024, 3, 1, 12, 0)
    assert parse_published_date(value) == value


@pytest.mark.parametrize("value", ["", "   ", "not a date", "2024-13-01", None, 42, ["2024-01-01"]])
def test_parse_rejects_non_dates(value):
    assert parse_published_date(value) is None


def test_parse_offset_near_minimum_date_is_rejected():
    assert parse_published_date("0001-01-01T00:00:00+01:00") is None


# ---------------------------------------------------------------------------
# Author / Category / BlogPost
# ---------------------------------------------------------------------------

def test_author_from_name_derives_id():
    author = Author.from_name("Jane Doe", avatar="/a.png", bio="Writer")
    assert author.id == "jane-doe"
    assert author.avatar == "/a.png"
    assert author.bio == "Writer"


def test_category_from_name():
    category = Category.from_name("Web Development")
    assert category.id == "web-development"
    assert category.slug == "web-development"
    assert category.name == "Web Development"
    assert category.description == "Web development articles and resources"


def _post(**kwargs) -> BlogPost:
    defaults = dict(slug="hello", title="Hello", published_date=datetime(2024, 1, 1))
    defaults.update(kwargs)
    return BlogPost(**defaults)


def test_post_id_is_slug():
    assert _post(slug="my-post").id == "my-post"


def test_post_has_category_case_insensitive_exact():
    post = _post(categories=["Web Development", "Design Systems"])
    assert post.has_category("web development")
    assert post.has_category("Design Systems")
    assert not post.has_category("Web")


def test_post_has_tag_case_insensitive_exact():
    post = _post(tags=["Python", "pytest"])
    assert post.has_tag("python")
    assert post.has_tag("PYTEST")
    assert not post.has_tag("py")


def test_post_to_dict_uses_content_field_names():
    post = _post(
        content="Body",
        featured_image="/img.png",
        read_time=4,
        source_path=Path("/posts/hello.mdx"),
    )
    data = post.to_dict()
    assert data["id"] == "hello"
    assert data["publishedDate"] == "2024-01-01T00:00:00"
    assert data["featuredImage"] == "/img.png"
    assert data["readTime"] == 4
    assert data["content"] == "Body"
    assert data["sourcePath"] == str(Path("/posts/hello.mdx"))
    assert data["author"] == {"id": "", "name": "", "avatar": "", "bio": ""}


def test_post_to_dict_without_content():
    assert "content" not in _post().to_dict(include_content=False)
