"""
Configuration and path management.

Provides site root detection and the per-site content settings.

Resolution order for site root:
  1. MDXBLOG_SITE_ROOT environment variable (highest priority)
  2. Walk up from cwd looking for a content/posts/ directory
  3. Global config file (~/.config/mdxblog/config.yaml) site_root key
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

POSTS_REL_PATH = Path("content") / "posts"
SITE_CONFIG_NAME = "mdxblog.yaml"

DEFAULT_LOCALES: tuple[str, ...] = ("ko", "en")
DEFAULT_LOCALE = "ko"


@dataclass(frozen=True)
class SiteConfig:
    """Resolved settings for one blog site."""

    root: Path
    posts_dir: Path
    locales: tuple[str, ...]
    default_locale: str


def get_global_config_path() -> Path:
    """Return the path to the global mdxblog config file.

    Respects XDG_CONFIG_HOME if set, otherwise defaults to
    ~/.config/mdxblog/config.yaml.

    Returns:
        Path to global config file (may not exist).
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "mdxblog" / "config.yaml"


def _load_yaml_mapping(path: Path) -> dict:
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config() -> dict:
    """Load the global mdxblog configuration.

    Returns:
        Configuration dict, or empty dict if file is missing or invalid.
    """
    return _load_yaml_mapping(get_global_config_path())


def _has_posts_dir(path: Path) -> bool:
    return (path / POSTS_REL_PATH).is_dir()


def _walk_up_for_posts(start_path: Path) -> Path | None:
    """Walk up directory tree looking for content/posts/.

    Args:
        start_path: Starting path for search.

    Returns:
        Path to the directory containing content/posts/, or None.
    """
    current = start_path.resolve()
    while True:
        if _has_posts_dir(current):
            return current
        if current == current.parent:
            return None
        current = current.parent


def find_site_root(start_path: Path | None = None) -> Path:
    """Find the blog site root using 3-tier resolution.

    Args:
        start_path: Starting path for the directory walk (defaults to cwd)

    Returns:
        Path to site root

    Raises:
        FileNotFoundError: If no site root is found by any method
    """
    env_root = os.environ.get("MDXBLOG_SITE_ROOT")
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if _has_posts_dir(env_path):
            return env_path
        raise FileNotFoundError(
            f"MDXBLOG_SITE_ROOT={env_root} does not contain a {POSTS_REL_PATH}/ directory."
        )

    if start_path is None:
        start_path = Path.cwd()
    result = _walk_up_for_posts(Path(start_path))
    if result is not None:
        return result

    site_root_str = load_global_config().get("site_root")
    if site_root_str:
        global_path = Path(site_root_str).expanduser().resolve()
        if _has_posts_dir(global_path):
            return global_path
        raise FileNotFoundError(
            f"Global config site_root={site_root_str} does not contain a "
            f"{POSTS_REL_PATH}/ directory."
        )

    raise FileNotFoundError(
        f"Could not find {POSTS_REL_PATH}/ starting from {start_path}. "
        f"Set MDXBLOG_SITE_ROOT, pass --root, or configure site_root in "
        f"{get_global_config_path()}."
    )


@lru_cache(maxsize=1)
def get_site_root() -> Path:
    """Get the cached site root path."""
    return find_site_root()


def _normalize_locales(raw, default_locale: str) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)) or not raw:
        raw = list(DEFAULT_LOCALES)

    locales: list[str] = []
    for value in raw:
        code = str(value).strip().lower()
        if code and code not in locales:
            locales.append(code)

    # The default locale is always servable
    if default_locale not in locales:
        locales.insert(0, default_locale)
    return tuple(locales)


def load_site_config(site_root: Path | None = None) -> SiteConfig:
    """Load the site settings from ``<root>/mdxblog.yaml``.

    Every key is optional:

    - ``locales``: supported locale codes (default ``[ko, en]``)
    - ``default_locale``: locale served by un-suffixed files (default ``ko``)
    - ``posts_dir``: content directory relative to the root
      (default ``content/posts``)

    Args:
        site_root: Site root path (uses cached default if not provided)

    Returns:
        SiteConfig with resolved paths and locales
    """
    if site_root is None:
        site_root = get_site_root()
    site_root = Path(site_root)

    data = _load_yaml_mapping(site_root / SITE_CONFIG_NAME)

    default_locale = str(data.get("default_locale") or DEFAULT_LOCALE).strip().lower()
    locales = _normalize_locales(data.get("locales"), default_locale)

    posts_rel = data.get("posts_dir") or POSTS_REL_PATH
    posts_dir = Path(posts_rel)
    if not posts_dir.is_absolute():
        posts_dir = site_root / posts_dir

    return SiteConfig(
        root=site_root,
        posts_dir=posts_dir,
        locales=locales,
        default_locale=default_locale,
    )
