"""Core utilities for mdxblog."""

from mdxblog.core.config import SiteConfig, get_site_root, load_site_config

__all__ = [
    "SiteConfig",
    "get_site_root",
    "load_site_config",
]
