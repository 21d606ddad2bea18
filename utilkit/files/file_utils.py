"""
File utility functions for utilkit.

Provides common file operations: whole-file reads and writes, copy, move,
touch, temp directory creation and buffered text streams. Text is always
encoded as UTF-8. I/O errors propagate unchanged to the caller.
"""

import os
import shutil
import tempfile
import time
from pathlib import Path
from typing import List, TextIO, Union

from ..core import get_config, get_logger, TempDirectoryError

logger = get_logger(__name__)


ENCODING = "utf-8"

PathLike = Union[str, Path]


def read_bytes(path: PathLike) -> bytes:
    """
    Read a whole file into memory.

    Args:
        path: Path to the file.

    Returns:
        File content as bytes.
    """
    return Path(path).read_bytes()


def read_text(path: PathLike) -> str:
    """
    Read a whole file as UTF-8 text.

    Line endings are returned exactly as stored.

    Args:
        path: Path to the file.

    Returns:
        Decoded file content.
    """
    with open(path, "r", encoding=ENCODING, newline="") as f:
        return f.read()


def read_lines(path: PathLike) -> List[str]:
    """
    Read a UTF-8 file as a list of lines.

    Lines may end with "\\n", "\\r\\n" or "\\r"; terminators are stripped
    and a trailing terminator does not add an empty last line.

    Args:
        path: Path to the file.

    Returns:
        List of lines without terminators.
    """
    with open(path, "r", encoding=ENCODING, newline=None) as f:
        return [line[:-1] if line.endswith("\n") else line for line in f]


def write_text(data: str, path: PathLike) -> None:
    """
    Write text to a file as UTF-8, replacing any existing content.

    Args:
        data: Text to write.
        path: Destination file.
    """
    with open(path, "w", encoding=ENCODING, newline="") as f:
        f.write(data)


def append_text(data: str, path: PathLike) -> None:
    """
    Append text to a file as UTF-8, creating the file if needed.

    Args:
        data: Text to append.
        path: Destination file.
    """
    with open(path, "a", encoding=ENCODING, newline="") as f:
        f.write(data)


def copy_file(src: PathLike, dst: PathLike) -> None:
    """
    Copy the bytes of src to dst, overwriting dst.

    Raises:
        shutil.SameFileError: If src and dst are the same file.
        FileNotFoundError: If src does not exist.
    """
    shutil.copyfile(src, dst)
    logger.debug(f"Copied {src} -> {dst}")


def move_file(src: PathLike, dst: PathLike) -> None:
    """
    Move src to dst.

    Renames when source and destination share a filesystem, otherwise
    copies and deletes the source.

    Raises:
        shutil.SameFileError: If src and dst are the same file.
        FileNotFoundError: If src does not exist.
    """
    if os.path.exists(dst) and os.path.samefile(src, dst):
        raise shutil.SameFileError(f"{str(src)!r} and {str(dst)!r} are the same file")
    shutil.move(str(src), str(dst))
    logger.debug(f"Moved {src} -> {dst}")


def touch(path: PathLike) -> None:
    """Create an empty file, or update the modification time if it exists."""
    Path(path).touch(exist_ok=True)


def _current_millis() -> int:
    return time.time_ns() // 1_000_000


def create_temp_directory() -> Path:
    """
    Create a new directory under the temp root.

    The name is ``<epoch-millis>-<counter>``; the counter starts at 0 and
    is bumped while the name is already taken.

    Returns:
        Path of the created, empty directory.

    Raises:
        TempDirectoryError: If every counter value up to the configured
            attempt limit is taken.
    """
    config = get_config()
    base_directory = Path(config.paths.temp_directory or tempfile.gettempdir())
    attempts = config.files.temp_dir_attempts
    base_name = f"{_current_millis()}-"

    for counter in range(attempts):
        candidate = base_directory / f"{base_name}{counter}"
        try:
            candidate.mkdir()
        except FileExistsError:
            continue
        logger.debug(f"Created temp directory {candidate}")
        return candidate

    raise TempDirectoryError(
        f"Failed to create directory within {attempts} attempts "
        f"(tried {base_name}0 to {base_name}{attempts - 1})",
        base_directory=str(base_directory),
        attempts=attempts
    )


def ensure_directory(path: PathLike) -> Path:
    """
    Create directory tree if it doesn't exist.

    Args:
        path: Directory path to create.

    Returns:
        Path object of the directory.
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def create_parent_dirs(path: PathLike) -> None:
    """
    Create every missing ancestor directory of path.

    Raises:
        FileExistsError: If the parent exists but is not a directory.
        NotADirectoryError: If a higher ancestor is a regular file.
    """
    parent = Path(path).resolve().parent
    if parent == Path(path).resolve():
        return
    ensure_directory(parent)


def open_reader(path: PathLike) -> TextIO:
    """
    Open a buffered UTF-8 reader. The caller must close it.

    Example:
        with open_reader(path) as reader:
            for line in reader:
                ...
    """
    return open(path, "r", encoding=ENCODING, buffering=get_config().files.buffer_size)


def open_writer(path: PathLike) -> TextIO:
    """Open a buffered UTF-8 writer that truncates the file. The caller must close it."""
    return open(path, "w", encoding=ENCODING, buffering=get_config().files.buffer_size)


def open_appender(path: PathLike) -> TextIO:
    """Open a buffered UTF-8 writer that appends to the file. The caller must close it."""
    return open(path, "a", encoding=ENCODING, buffering=get_config().files.buffer_size)


if __name__ == "__main__":
    temp_dir = create_temp_directory()
    print(f"Temp directory: {temp_dir}")

    sample = temp_dir / "nested" / "sample.txt"
    create_parent_dirs(sample)
    write_text("première ligne\nseconde ligne\n", sample)
    append_text("troisième ligne\n", sample)
    print(f"Lines: {read_lines(sample)}")

    copy = temp_dir / "copy.txt"
    copy_file(sample, copy)
    print(f"Copy matches: {read_bytes(copy) == read_bytes(sample)}")

    shutil.rmtree(temp_dir)
