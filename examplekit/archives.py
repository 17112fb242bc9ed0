"""Zip archive inspection and extraction, raw deflate and gzip streams."""

from __future__ import annotations

import gzip
import os
import shutil
import zipfile
import zlib
from typing import BinaryIO

_CHUNK = 64 * 1024


def zip_content(path: str | os.PathLike[str]) -> list[str]:
    """Names of the entries in a zip archive, leaving out hidden ones."""
    with zipfile.ZipFile(path) as archive:
        return [name for name in archive.namelist() if not name.startswith(".")]


def _target(dest: str, name: str) -> str:
    return os.path.normpath(os.path.join(dest, *name.split("/")))


def unzip_all(path: str | os.PathLike[str], dest: str | os.PathLike[str]) -> list[str]:
    """Extract every entry of a zip archive below ``dest``.

    Returns the paths written, in archive order. An entry that would land
    outside ``dest`` stops the extraction with ValueError.
    """
    base = os.path.normpath(os.fspath(dest))
    prefix = base + os.sep
    written: list[str] = []
    with zipfile.ZipFile(path) as archive:
        for info in archive.infolist():
            target = _target(base, info.filename)
            if not target.startswith(prefix):
                raise ValueError(f"invalid file path: {info.filename!r}")
            if info.is_dir():
                os.makedirs(target, exist_ok=True)
                written.append(target)
                continue
            os.makedirs(os.path.dirname(target), exist_ok=True)
            with archive.open(info) as source, open(target, "wb") as sink:
                shutil.copyfileobj(source, sink, _CHUNK)
            mode = (info.external_attr >> 16) & 0o777
            if mode:
                os.chmod(target, mode)
            written.append(target)
    return written


def read_zipped(zip_path: str | os.PathLike[str], name: str) -> str:
    """Text of the entry ``name`` in the archive, or ``""`` if there is none."""
    with zipfile.ZipFile(zip_path) as archive:
        for info in archive.infolist():
            if info.filename == name:
                return archive.read(info).decode("utf-8", errors="replace")
    return ""


def compress_file(
    source: str | os.PathLike[str], target: str | os.PathLike[str]
) -> None:
    """Write ``source`` to ``target`` as a raw deflate stream at the best level."""
    packer = zlib.compressobj(9, zlib.DEFLATED, -15)
    with open(source, "rb") as src, open(target, "wb") as dst:
        for chunk in iter(lambda: src.read(_CHUNK), b""):
            dst.write(packer.compress(chunk))
        dst.write(packer.flush())


def decompress_file(
    source: str | os.PathLike[str], target: str | os.PathLike[str]
) -> None:
    """Inflate the raw deflate stream in ``source`` into ``target``."""
    unpacker = zlib.decompressobj(-15)
    with open(source, "rb") as src, open(target, "wb") as dst:
        try:
            for chunk in iter(lambda: src.read(_CHUNK), b""):
                dst.write(unpacker.decompress(chunk))
            dst.write(unpacker.flush())
        except zlib.error as exc:
            raise ValueError(f"invalid deflate data: {exc}") from exc


def gzip_stream(source: BinaryIO, target: BinaryIO, level: int = 6) -> None:
    """Gzip everything read from ``source`` into ``target`` at ``level`` (0-9)."""
    if not 0 <= level <= 9:
        raise ValueError(f"compression level must be between 0 and 9, got {level}")
    with gzip.GzipFile(
        filename="", mode="wb", compresslevel=level, fileobj=target, mtime=0
    ) as packer:
        shutil.copyfileobj(source, packer, _CHUNK)