"""Test fixtures: sample case corpora and helpers to write or pack new ones."""

from __future__ import annotations

import zipfile
from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent

#: Well-formed corpus: ``sql`` (4 cases), ``unsupported_sql`` (1), ``asserts``.
RESOURCES_DIR = _FIXTURES_DIR / "resources"

#: ``sql`` category holding one malformed document.
BROKEN_DIR = _FIXTURES_DIR / "broken"

#: ``sql`` category with a case restricted to an unknown database type.
UNKNOWN_DIALECT_DIR = _FIXTURES_DIR / "unknown_dialect"

#: ``sql`` category where two documents define the same id.
DUPLICATES_DIR = _FIXTURES_DIR / "duplicates"

SUPPORTED_IDS = ["delete_all", "insert_order", "select_by_id", "select_like"]


def sql_cases_xml(*cases: tuple[str, str] | tuple[str, str, str]) -> str:
    """Render ``(id, value[, database_types])`` tuples as a ``<sql-cases>`` document.

    Values are written as given, so callers escape XML special characters.
    """
    lines = ["<sql-cases>"]
    for case in cases:
        attrs = f'id="{case[0]}" value="{case[1]}"'
        if len(case) == 3:
            attrs += f' database-types="{case[2]}"'
        lines.append(f"    <sql-case {attrs} />")
    lines.append("</sql-cases>")
    return "\n".join(lines)


def pack_archive(source_dir: Path, archive: Path, base: str = "") -> Path:
    """Zip every file below ``source_dir`` into ``archive`` under ``base/``.

    Args:
        source_dir: Directory to pack.
        archive: Zip file to create.
        base: Entry-name prefix, e.g. ``"sqlcases/resources"``.

    Returns:
        ``archive``.
    """
    with zipfile.ZipFile(archive, "w") as zf:
        for path in sorted(source_dir.rglob("*")):
            if path.is_file():
                name = path.relative_to(source_dir).as_posix()
                zf.write(path, f"{base}/{name}" if base else name)
    return archive
