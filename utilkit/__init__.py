"""
utilkit package.

Static helpers over Python sequences and the filesystem: list predicates,
factory shortcuts, sort/search/shuffle delegation, live views, set-style
operations, and UTF-8 file read/write/copy/move helpers.
"""

__version__ = "1.0.0"
