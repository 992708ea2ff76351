"""mdxblog - content layer for a multilingual MDX blog."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
