"""Validation of Netplan documents against the compiled schema.

Only the first violation reported by ``iter_errors`` is surfaced. That order
follows jsonschema's traversal of the schema and is not guaranteed to be
meaningful; callers must not rely on which of several problems is reported.
"""

from __future__ import annotations

import re
from typing import Any, Optional

import yaml
from jsonschema.exceptions import ValidationError

from netplan_check.models import ErrorKind, ValidationIssue, ValidationResult
from netplan_check.schema import CompiledSchema
from netplan_check.utils import get_logger, to_compact_json, to_json_pointer
from netplan_check.yaml_loader import load_yaml

logger = get_logger(__name__)


def _first_unexpected_key(error: ValidationError) -> Optional[str]:
    instance = error.instance
    if not isinstance(instance, dict):
        return None
    properties = error.schema.get("properties", {})
    patterns = error.schema.get("patternProperties", {})
    for key in instance:
        if key in properties:
            continue
        if any(re.search(pattern, key) for pattern in patterns):
            continue
        return key
    return None


def classify_error(error: ValidationError) -> ValidationIssue:
    """Map a jsonschema error onto one of the user-facing issue kinds."""
    path = to_json_pointer(error.absolute_path)

    if error.validator == "additionalProperties":
        key = _first_unexpected_key(error)
        if key is not None:
            return ValidationIssue(kind=ErrorKind.UNEXPECTED_KEYWORD, path=path, detail=key)

    if error.validator == "uniqueItems":
        return ValidationIssue(kind=ErrorKind.DUPLICATE_ITEM, path=path, detail=to_compact_json(error.instance))

    return ValidationIssue(kind=ErrorKind.UNEXPECTED_VALUE, path=path, detail=to_compact_json(error.instance))


def validate_document(schema: CompiledSchema, data: Any) -> ValidationResult:
    """Validate an already parsed document."""
    error = next(iter(schema.iter_errors(data)), None)
    if error is None:
        return ValidationResult.success()
    issue = classify_error(error)
    logger.debug("document rejected kind=%s path=%s validator=%s", issue.kind.value, issue.path, error.validator)
    return ValidationResult.failure(issue)


def validate(schema: CompiledSchema, text: str) -> ValidationResult:
    """Parse ``text`` as YAML and validate it against ``schema``.

    Malformed YAML short-circuits with a parse failure before any schema
    check runs.
    """
    try:
        data = load_yaml(text)
    except (yaml.YAMLError, RecursionError) as e:
        logger.debug("document parse failed: %s", e)
        return ValidationResult.failure(ValidationIssue(kind=ErrorKind.PARSE_FAILURE))
    return validate_document(schema, data)
