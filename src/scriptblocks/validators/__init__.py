"""Validation modules for scriptblocks."""

from __future__ import annotations

from scriptblocks.validators.document_validator import (
    DocumentValidator,
    ValidationResult,
    load_document,
)

__all__ = ["DocumentValidator", "ValidationResult", "load_document"]
