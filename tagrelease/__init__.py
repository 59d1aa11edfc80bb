"""Resolve a git tag to its GitHub release and expose it as step outputs."""

__version__ = "0.3.0"
