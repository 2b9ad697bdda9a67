"""Gzip-compressed tar archives of files and directories."""

from __future__ import annotations

import io
import os
import stat
import tarfile
from collections.abc import Iterator


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* is a directory.

    Raises OSError (e.g. FileNotFoundError) when the path cannot be inspected.
    """
    return stat.S_ISDIR(os.stat(path).st_mode)


def _walk(path: str) -> Iterator[str]:
    """Yield *path* and everything below it in lexical order, root first."""
    yield path
    if stat.S_ISDIR(os.lstat(path).st_mode):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def tar_dir(src: str | os.PathLike[str], file_mode: int) -> bytes:
    """Archive the directory *src* as tar + gzip and return the bytes.

    Every entry is named after its path as walked from *src* and gets
    *file_mode* as permissions. Symbolic links are skipped.
    """
    src = os.fspath(src)
    print(f">> creating TAR file from directory: {src}")

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for path in _walk(src):
            info_stat = os.lstat(path)
            if stat.S_ISLNK(info_stat.st_mode):
                print(f">> skipping symlink: {path}")
                continue

            info = tar.gettarinfo(path, arcname=path.replace(os.sep, "/"))
            info.mode = file_mode

            if info.isdir():
                tar.addfile(info)
            else:
                with open(path, "rb") as data:
                    tar.addfile(info, data)
    return buffer.getvalue()


def tar_file(content: bytes, base_path: str, file_mode: int) -> bytes:
    """Archive *content* as a single tar + gzip entry named after *base_path*."""
    name = os.path.basename(os.path.normpath(base_path)) if base_path else "."
    info = tarfile.TarInfo(name)
    info.mode = file_mode
    info.size = len(content)

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        tar.addfile(info, io.BytesIO(content))
    return buffer.getvalue()