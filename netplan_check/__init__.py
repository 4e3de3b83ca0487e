"""Structural validation of Netplan network definitions."""

from .models import ErrorKind, ValidationIssue, ValidationResult
from .schema import CompiledSchema, SchemaBuildError, build_schema
from .validate import validate, validate_document

__all__ = [
    "CompiledSchema",
    "ErrorKind",
    "SchemaBuildError",
    "ValidationIssue",
    "ValidationResult",
    "build_schema",
    "validate",
    "validate_document",
]
