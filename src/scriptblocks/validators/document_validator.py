"""Boundary validation for block documents."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from scriptblocks.config import get_logger
from scriptblocks.exceptions import DocumentError
from scriptblocks.models import (
    CLASSIFIED_TYPES,
    Block,
    ScriptDocument,
    new_block_id,
)

logger = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of document validation with detailed feedback."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    duplicate_ids: list[str] = field(default_factory=list)


def load_document(data: Any) -> ScriptDocument:
    """Build a ScriptDocument from JSON-like data.

    Accepts either ``{"blocks": [...]}`` or a bare list of blocks.

    Raises:
        DocumentError: If the data does not describe a block document
    """
    if isinstance(data, list):
        data = {"blocks": data}
    try:
        return ScriptDocument.model_validate(data)
    except PydanticValidationError as e:
        raise DocumentError(
            message="Invalid block document",
            hint="Expected {'blocks': [{'id': ..., 'type': ..., 'text': ...}]}",
            details={"errors": e.error_count(), "first_error": e.errors()[0]["msg"]},
        ) from e


class DocumentValidator:
    """Check and repair the invariants of a block document."""

    def __init__(self, id_factory: Callable[[], str] = new_block_id) -> None:
        """Initialize the validator.

        Args:
            id_factory: Source of fresh ids used when repairing
        """
        self.id_factory = id_factory

    def validate(self, document: ScriptDocument) -> ValidationResult:
        """Validate a document.

        Duplicate or empty ids are errors. Empty block text and block types
        that plain text never parses into are warnings.
        """
        errors: list[str] = []
        warnings: list[str] = []

        counts = Counter(block.id for block in document.blocks)
        duplicate_ids = [
            block_id for block_id, count in counts.items() if count > 1 and block_id
        ]
        for block_id in duplicate_ids:
            errors.append(f"Block id '{block_id}' is used {counts[block_id]} times")
        if counts.get("", 0):
            errors.append(f"{counts['']} block(s) have an empty id")

        for index, block in enumerate(document.blocks):
            if not block.text.strip():
                warnings.append(f"Block {index} ({block.type.label}) has no text")
            if block.type not in CLASSIFIED_TYPES:
                warnings.append(
                    f"Block {index} is a {block.type.label} block, which does not "
                    "survive a round trip through plain text"
                )

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            duplicate_ids=duplicate_ids,
        )

    def repair(self, document: ScriptDocument) -> ScriptDocument:
        """Return a copy of the document with unique, non-empty ids.

        The first block using an id keeps it; later ones get fresh ids.
        """
        seen: set[str] = set()
        blocks: list[Block] = []
        replaced = 0
        for block in document.blocks:
            block_id = block.id
            if not block_id or block_id in seen:
                block_id = self.id_factory()
                while block_id in seen:
                    block_id = self.id_factory()
                replaced += 1
            seen.add(block_id)
            blocks.append(block.model_copy(update={"id": block_id}))

        if replaced:
            logger.info("Repaired block ids", replaced=replaced, blocks=len(blocks))
        return ScriptDocument(blocks=blocks)

    def ensure_valid(self, document: ScriptDocument) -> ScriptDocument:
        """Return the document unchanged if it is valid.

        Raises:
            DocumentError: If the document has errors
        """
        result = self.validate(document)
        if not result.is_valid:
            raise DocumentError(
                message="Block document failed validation",
                hint="Run 'scriptblocks validate --repair' to assign fresh ids",
                details={"errors": "; ".join(result.errors)},
            )
        return document
