"""
Files module providing UTF-8 file helpers.

Depends only on the core module.
"""

from .file_utils import (
    ENCODING,
    read_bytes,
    read_text,
    read_lines,
    write_text,
    append_text,
    copy_file,
    move_file,
    touch,
    create_temp_directory,
    ensure_directory,
    create_parent_dirs,
    open_reader,
    open_writer,
    open_appender
)

__all__ = [
    "ENCODING",
    "read_bytes",
    "read_text",
    "read_lines",
    "write_text",
    "append_text",
    "copy_file",
    "move_file",
    "touch",
    "create_temp_directory",
    "ensure_directory",
    "create_parent_dirs",
    "open_reader",
    "open_writer",
    "open_appender"
]
