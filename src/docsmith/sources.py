"""Source unit loading from files, directories and zip archives.

Paths inside the input are reported relative to its root with POSIX
separators, in sorted order, so repeated runs see units in the same order.
Files containing NUL bytes are treated as binary and skipped.
"""

import logging
import zipfile
from collections.abc import Iterable, Iterator
from fnmatch import fnmatch
from pathlib import Path, PurePosixPath

from docsmith.models import SourceUnit

logger = logging.getLogger(__name__)


def _selected(relative: str, include: Iterable[str], exclude: Iterable[str]) -> bool:
    include = list(include)
    if include and not any(fnmatch(relative, pattern) for pattern in include):
        return False
    return not any(fnmatch(relative, pattern) for pattern in exclude)


def _decode(relative: str, data: bytes) -> str | None:
    if b"\x00" in data:
        logger.debug("Skipping binary file: %s", relative)
        return None
    return data.decode("utf-8", errors="replace")


def _iter_directory(root: Path) -> Iterator[tuple[str, bytes]]:
    for path in sorted(p for p in root.rglob("*") if p.is_file()):
        yield path.relative_to(root).as_posix(), path.read_bytes()


def _iter_zip(archive: Path) -> Iterator[tuple[str, bytes]]:
    with zipfile.ZipFile(archive) as zf:
        for info in sorted(zf.infolist(), key=lambda i: i.filename):
            if info.is_dir():
                continue
            yield PurePosixPath(info.filename).as_posix(), zf.read(info)


def load_sources(
    path: Path,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> list[SourceUnit]:
    """Read source units from a file, a directory tree or a zip archive.

    Args:
        path: File, directory or ``.zip`` archive
        include: Glob patterns a relative path must match (empty means all)
        exclude: Glob patterns that drop a relative path

    Returns:
        Source units in sorted path order

    Raises:
        FileNotFoundError: If the path does not exist
        ValueError: If a ``.zip`` file is not a valid archive
    """
    if not path.exists():
        raise FileNotFoundError(f"Source path does not exist: {path}")

    include = list(include)
    exclude = list(exclude)

    if path.is_dir():
        entries: Iterable[tuple[str, bytes]] = _iter_directory(path)
    elif path.suffix.lower() == ".zip":
        if not zipfile.is_zipfile(path):
            raise ValueError(f"Not a valid zip archive: {path}")
        entries = _iter_zip(path)
    else:
        entries = [(path.name, path.read_bytes())]

    units: list[SourceUnit] = []
    for relative, data in entries:
        if not _selected(relative, include, exclude):
            continue
        content = _decode(relative, data)
        if content is None:
            continue
        units.append(SourceUnit(name=PurePosixPath(relative).name, path=relative, content=content))

    logger.info("Loaded %d source file(s) from %s", len(units), path)
    return units
