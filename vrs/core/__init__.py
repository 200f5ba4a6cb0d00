"""Core interfaces and abstractions for vrs."""

from vrs.core.interfaces import VCSCommitter

__all__ = ["VCSCommitter"]
