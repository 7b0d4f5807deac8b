"""Case definition discovery: directory trees and packaged archives.

A :class:`ResourceSource` enumerates the definition documents filed under a
category prefix.  Two implementations exist and the right one is picked by
:func:`probe_source` from the shape of the deployment:

``DirectorySource``
    Loose files, e.g. a source checkout or an installed package directory.
    The category directory's own files are read, plus the immediate files
    of each of its subdirectories.

``ArchiveSource``
    A zip archive, e.g. a wheel or a zipapp the package is imported from.
    Every entry under ``<base>/<prefix>/`` with the expected extension is
    read.

A missing category is not an error in either mode; it contributes nothing.
"""
from __future__ import annotations

import io
import zipfile
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from sqlcases.config import CASE_FILE_EXTENSION
from sqlcases.logging_config import logger


@dataclass(frozen=True)
class Resource:
    """A discovered definition document.

    Attributes:
        name: Path or archive entry name, used in diagnostics.
        opener: Returns a fresh binary stream over the document.
    """

    name: str
    opener: Callable[[], BinaryIO]

    def open(self) -> BinaryIO:
        """Returns a binary stream over the document; the caller closes it."""
        return self.opener()


class ResourceSource(ABC):
    """Enumerates definition documents under a category prefix."""

    def __init__(self, extension: str = CASE_FILE_EXTENSION) -> None:
        self._extension = extension

    @abstractmethod
    def list_resources(self, prefix: str) -> list[Resource]:
        """Return every document filed under ``prefix``.

        Args:
            prefix: Category name, e.g. ``"sql"``.

        Returns:
            Resources in a stable order; empty if the category is absent.
        """

    @property
    @abstractmethod
    def location(self) -> str:
        """Return a human-readable description of where resources live."""

    def _accepts(self, name: str) -> bool:
        return name.endswith(self._extension)


class DirectorySource(ResourceSource):
    """Reads definition documents from a directory tree.

    Args:
        root: Directory holding one subdirectory per category.
        extension: Only files with this suffix are returned.
    """

    def __init__(self, root: Path, extension: str = CASE_FILE_EXTENSION) -> None:
        super().__init__(extension)
        self._root = root

    @property
    def location(self) -> str:
        return str(self._root)

    def list_resources(self, prefix: str) -> list[Resource]:
        base = self._root / prefix
        if not base.is_dir():
            logger.debug(f"No case directory at {base}; skipping category '{prefix}'")
            return []
        result: list[Resource] = []
        for child in sorted(base.iterdir()):
            if child.is_dir():
                result.extend(
                    self._resource(f) for f in sorted(child.iterdir()) if self._is_case_file(f)
                )
            elif self._is_case_file(child):
                result.append(self._resource(child))
        return result

    def _is_case_file(self, path: Path) -> bool:
        return path.is_file() and self._accepts(path.name)

    @staticmethod
    def _resource(path: Path) -> Resource:
        return Resource(name=str(path), opener=lambda: path.open("rb"))


class ArchiveSource(ResourceSource):
    """Reads definition documents from entries of a zip archive.

    Args:
        archive: Path of the zip file.
        base: Entry-name prefix of the resource root inside the archive
            (``""`` when categories sit at the archive root).
        extension: Only entries with this suffix are returned.
    """

    def __init__(
        self, archive: Path, base: str = "", extension: str = CASE_FILE_EXTENSION
    ) -> None:
        super().__init__(extension)
        self._archive = archive
        self._base = base.strip("/")

    @property
    def location(self) -> str:
        return f"{self._archive}!/{self._base}"

    def list_resources(self, prefix: str) -> list[Resource]:
        entry_prefix = f"{self._base}/{prefix}/" if self._base else f"{prefix}/"
        with zipfile.ZipFile(self._archive) as archive:
            names = sorted(
                n
                for n in archive.namelist()
                if n.startswith(entry_prefix) and self._accepts(n)
            )
        if not names:
            logger.debug(f"No entries under {entry_prefix} in {self._archive}")
        return [self._resource(n) for n in names]

    def _resource(self, name: str) -> Resource:
        def opener() -> BinaryIO:
            with zipfile.ZipFile(self._archive) as archive:
                return io.BytesIO(archive.read(name))

        return Resource(name=f"{self._archive}!/{name}", opener=opener)


def probe_source(
    location: Path,
    archive_base: str | None = None,
    extension: str = CASE_FILE_EXTENSION,
) -> ResourceSource:
    """Pick the source implementation matching how ``location`` is deployed.

    ``location`` is treated as archive-backed when it, or one of its parents,
    is a zip file.  That covers both an explicit archive path and a resource
    directory of a package imported from a zip (``.../app.pyz/pkg/resources``).

    Args:
        location: Resource root to probe.
        archive_base: Entry-name prefix inside the archive.  Defaults to the
            part of ``location`` below the archive file.
        extension: Suffix of definition documents.

    Returns:
        An :class:`ArchiveSource` or a :class:`DirectorySource`.
    """
    for candidate in (location, *location.parents):
        if candidate.is_file() and zipfile.is_zipfile(candidate):
            if archive_base is None:
                archive_base = location.relative_to(candidate).as_posix()
                if archive_base == ".":
                    archive_base = ""
            logger.debug(f"Reading cases from archive {candidate} (base '{archive_base}')")
            return ArchiveSource(candidate, archive_base, extension)
    logger.debug(f"Reading cases from directory {location}")
    return DirectorySource(location, extension)
