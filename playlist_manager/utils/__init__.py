"""Utility functions."""

from playlist_manager.utils.identifiers import IdentifierFactory, new_identifier

__all__ = ["IdentifierFactory", "new_identifier"]
