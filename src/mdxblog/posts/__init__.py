"""Blog post commands."""
