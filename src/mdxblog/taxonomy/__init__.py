"""Category and tag commands."""
