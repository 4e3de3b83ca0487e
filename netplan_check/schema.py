"""Assembly of the compiled Netplan schema."""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Optional

import yaml
from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from netplan_check.config.constants import (
    INSERTION_POINT_TEMPLATE,
    PATCHED_CATEGORIES,
    WILDCARD_ENTRY,
)
from netplan_check.schema_data import COMMON_PROPERTIES, SCHEMA
from netplan_check.utils import get_logger, to_json_pointer
from netplan_check.yaml_loader import load_yaml

logger = get_logger(__name__)

# Compiled form of the schema; immutable once built and safe to share.
CompiledSchema = Draft7Validator

INSERTION_POINTS = tuple(
    INSERTION_POINT_TEMPLATE.format(category=category, entry=WILDCARD_ENTRY)
    for category in PATCHED_CATEGORIES
)


class SchemaBuildError(RuntimeError):
    """The embedded schema could not be assembled or compiled."""


def resolve_pointer(document: Any, pointer: str) -> Optional[Dict[str, Any]]:
    """Return the mapping at ``pointer`` inside ``document``, or None."""
    if pointer == "":
        return document if isinstance(document, dict) else None

    node = document
    for token in pointer.lstrip("/").split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        else:
            return None
    return node if isinstance(node, dict) else None


def patch_insertion_points(
    document: Dict[str, Any],
    fragment: Dict[str, Any],
    pointers: Iterable[str] = INSERTION_POINTS,
) -> List[str]:
    """Merge every key of ``fragment`` into each mapping named by ``pointers``.

    Keys already present at an insertion point are overwritten by the
    fragment. Pointers that do not resolve to a mapping are skipped. Returns
    the pointers that were patched.
    """
    patched = []
    for pointer in pointers:
        properties = resolve_pointer(document, pointer)
        if properties is None:
            logger.debug("insertion point missing pointer=%s", pointer)
            continue
        for key, value in fragment.items():
            properties[key] = copy.deepcopy(value)
        patched.append(pointer)
    return patched


def _load_literal(name: str, text: str) -> Dict[str, Any]:
    try:
        data = load_yaml(text)
    except yaml.YAMLError as e:
        raise SchemaBuildError(f"{name} literal is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise SchemaBuildError(f"{name} literal is not a mapping")
    return data


def build_schema() -> CompiledSchema:
    """Assemble the Netplan schema and compile it as a draft-7 validator.

    Raises :class:`SchemaBuildError` when the assembled document is not a
    valid draft-7 schema. Nothing partially built is ever returned.
    """
    document = _load_literal("schema", SCHEMA)
    fragment = _load_literal("common properties", COMMON_PROPERTIES)

    patched = patch_insertion_points(document, fragment)

    try:
        Draft7Validator.check_schema(document)
    except SchemaError as e:
        detail = f"{to_json_pointer(e.absolute_schema_path)}, {e.validator}, {to_json_pointer(e.absolute_path)}"
        raise SchemaBuildError(detail) from e

    logger.info("schema built patched=%d common_properties=%d", len(patched), len(fragment))
    return Draft7Validator(document, format_checker=Draft7Validator.FORMAT_CHECKER)
