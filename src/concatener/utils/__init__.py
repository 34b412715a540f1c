"""
concatener.utils – Small shared path helpers (home expansion, separators, ordering).
"""
from .paths import expand_home, fs_sort_key, has_separator, split_last_separator, split_segments

__all__ = ["expand_home", "fs_sort_key", "has_separator", "split_last_separator", "split_segments"]
