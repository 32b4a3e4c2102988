"""File loading helpers shared by CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from scriptblocks.exceptions import DocumentError, ScriptBlocksFileNotFoundError
from scriptblocks.models import ScriptDocument
from scriptblocks.validators import load_document


def read_script_text(path: Path) -> str:
    """Read a screenplay text file.

    Raises:
        ScriptBlocksFileNotFoundError: If the file does not exist
    """
    if not path.is_file():
        raise ScriptBlocksFileNotFoundError(
            message=f"Script file not found: {path}",
            hint="Pass the path to a plain-text or Fountain screenplay",
            details={"path": str(path)},
        )
    return path.read_text(encoding="utf-8")


def read_block_document(path: Path) -> ScriptDocument:
    """Read a JSON block document as written by ``scriptblocks parse --json``.

    Raises:
        ScriptBlocksFileNotFoundError: If the file does not exist
        DocumentError: If the file is not a valid block document
    """
    if not path.is_file():
        raise ScriptBlocksFileNotFoundError(
            message=f"Block document not found: {path}",
            hint="Create one with 'scriptblocks parse SCRIPT --json > doc.json'",
            details={"path": str(path)},
        )
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DocumentError(
            message=f"Block document is not valid JSON: {path}",
            hint="Check the file for truncation or stray characters",
            details={"line": e.lineno, "column": e.colno},
        ) from e
    return load_document(data)
