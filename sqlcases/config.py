"""Pydantic model for corpus discovery configuration.

The discovery categories (``sql`` and ``unsupported_sql``) are fixed
conventions.  Only the resource root and the duplicate-id policy can change,
mostly in tests::

    loader = SQLCasesLoader(CorpusConfig(root=tmp_path, strict_duplicates=True))
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

#: Package directory holding the bundled default corpus.
DEFAULT_RESOURCE_ROOT: Path = Path(__file__).parent / "resources"

#: Category holding cases the system under test supports.
SUPPORTED_PATH = "sql"

#: Category holding cases the system under test must reject.
UNSUPPORTED_PATH = "unsupported_sql"

#: Extension of case definition documents.
CASE_FILE_EXTENSION = ".xml"


class CorpusConfig(BaseModel):
    """Where and how the two case corpora are discovered.

    Attributes:
        root: Resource root; a directory, or a zip archive (or a path inside
            one).  ``None`` means the bundled ``sqlcases/resources``.
        archive_base: Entry-name prefix of the resource root inside an
            archive.  Derived from ``root`` when left as ``None``.
        extension: Only resources with this suffix are parsed.
        strict_duplicates: Raise on a duplicate id instead of overwriting.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path | None = None
    archive_base: str | None = None
    extension: str = CASE_FILE_EXTENSION
    strict_duplicates: bool = False

    @property
    def resource_root(self) -> Path:
        """Returns the configured root, or the bundled resource directory."""
        return self.root if self.root is not None else DEFAULT_RESOURCE_ROOT
