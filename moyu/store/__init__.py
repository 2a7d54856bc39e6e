"""Bookmark storage helpers.

Re-exported here so callers can `from moyu.store import load_bookmark`.
"""

from .bookmarks import bookmark_path_for, has_bookmark, load_bookmark, save_bookmark, source_path_for

__all__ = ["bookmark_path_for", "has_bookmark", "load_bookmark", "save_bookmark", "source_path_for"]
