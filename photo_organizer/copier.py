import logging
import os
import shutil
import stat
from pathlib import Path


class CopyError(Exception):
    """Exception raised when a path cannot take part in a copy."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


def copy_file(src: Path, dst: Path) -> None:
    """Copy a file from src to dst.

    If src and dst exist and are the same file, this is a no-op. Otherwise, try
    to hard link dst to src; if that fails, copy the file contents.

    Raises:
        CopyError: if src, or an existing dst, is not a regular file
        OSError: if the copy itself fails
    """
    src_stat = os.stat(src)
    if not stat.S_ISREG(src_stat.st_mode):
        # Directories, devices, sockets and the like can't be copied
        raise CopyError(
            Path(src),
            f"non-regular source file {Path(src).name} ({stat.filemode(src_stat.st_mode)})",
        )

    try:
        dst_stat = os.stat(dst)
    except FileNotFoundError:
        pass
    else:
        if not stat.S_ISREG(dst_stat.st_mode):
            raise CopyError(
                Path(dst),
                f"non-regular destination file {Path(dst).name} ({stat.filemode(dst_stat.st_mode)})",
            )
        if os.path.samestat(src_stat, dst_stat):
            logging.debug(f"{dst} is already {src}")
            return

    try:
        os.link(src, dst)
        logging.debug(f"Linked {src} -> {dst}")
        return
    except OSError as e:
        logging.debug(f"Could not link {src} -> {dst} ({e}), copying contents")

    copy_file_contents(src, dst)


def copy_file_contents(src: Path, dst: Path) -> None:
    """Copy the contents of src to dst, creating or truncating dst.

    The destination is flushed and synced to disk before it is closed.
    """
    with open(src, "rb") as fsrc, open(dst, "wb") as fdst:
        shutil.copyfileobj(fsrc, fdst)
        fdst.flush()
        os.fsync(fdst.fileno())
    logging.debug(f"Copied {src} -> {dst}")
