"""Tests for config CLI commands and the top-level dispatcher."""

from __future__ import annotations

import json
import logging

import pytest
import yaml
from click.testing import CliRunner

from mdxblog import __version__
from mdxblog.cli import main
from mdxblog.config.commands import config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def clean_logging():
    """Drop handlers the dispatcher installs so later tests see quiet logs."""
    logger = logging.getLogger("mdxblog")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


class TestConfigShow:

    def test_json_defaults(self, runner, mock_site_root):
        result = runner.invoke(config, ["show", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["root"] == str(mock_site_root)
        assert data["posts_dir"] == str(mock_site_root / "content" / "posts")
        assert data["posts_dir_exists"] is True
        assert data["locales"] == ["ko", "en"]
        assert data["default_locale"] == "ko"

    def test_json_with_site_config(self, runner, mock_site_root):
        (mock_site_root / "mdxblog.yaml").write_text(
            yaml.dump({"locales": ["en", "ja"], "default_locale": "en"}), encoding="utf-8"
        )
        result = runner.invoke(config, ["show", "--json"])
        data = json.loads(result.output)
        assert data["locales"] == ["en", "ja"]
        assert data["default_locale"] == "en"

    def test_table(self, runner, mock_site_root):
        result = runner.invoke(config, ["show"])
        assert result.exit_code == 0
        assert "Default locale" in result.output

    def test_missing_root(self, runner, monkeypatch):
        from mdxblog.core import config as config_module

        def _missing():
            raise FileNotFoundError("Could not find content/posts/")

        monkeypatch.setattr(config_module, "get_site_root", _missing)
        result = runner.invoke(config, ["show"])
        assert result.exit_code == 1
        assert "Could not find" in result.output


class TestMain:

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_groups(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for name in ("posts", "taxonomy", "config"):
            assert name in result.output

    def test_root_option(self, runner, tmp_path, write_post, clean_logging):
        write_post("hello.mdx", slug="hello")
        result = runner.invoke(main, ["--root", str(tmp_path), "posts", "list", "--json"])
        assert result.exit_code == 0, result.output
        assert [p["slug"] for p in json.loads(result.output)] == ["hello"]

    def test_verbose_sets_debug_level(self, runner, tmp_path, posts_dir, clean_logging):
        result = runner.invoke(main, ["-v", "--root", str(tmp_path), "config", "show", "--json"])
        assert result.exit_code == 0, result.output
        assert logging.getLogger("mdxblog").level == logging.DEBUG
