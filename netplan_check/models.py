"""Pydantic models describing the outcome of validating one document."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from netplan_check.config.constants import (
    DUPLICATE_ITEM_TEMPLATE,
    PARSE_FAILURE_MESSAGE,
    UNEXPECTED_KEYWORD_TEMPLATE,
    UNEXPECTED_VALUE_TEMPLATE,
)


class BaseModelWithConfig(BaseModel):
    """Immutable base model forbidding silent data loss."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class ErrorKind(str, Enum):
    UNEXPECTED_KEYWORD = "unexpected_keyword"
    DUPLICATE_ITEM = "duplicate_item"
    UNEXPECTED_VALUE = "unexpected_value"
    PARSE_FAILURE = "parse_failure"


class ValidationIssue(BaseModelWithConfig):
    """A single classified problem found in a document.

    ``path`` is a JSON pointer into the document (``""`` for the root).
    ``detail`` is the unexpected key for ``UNEXPECTED_KEYWORD`` and the
    compact JSON rendering of the offending value otherwise.
    """

    kind: ErrorKind
    path: str = ""
    detail: str = ""

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.PARSE_FAILURE:
            return PARSE_FAILURE_MESSAGE
        if self.kind is ErrorKind.UNEXPECTED_KEYWORD:
            template = UNEXPECTED_KEYWORD_TEMPLATE
        elif self.kind is ErrorKind.DUPLICATE_ITEM:
            template = DUPLICATE_ITEM_TEMPLATE
        else:
            template = UNEXPECTED_VALUE_TEMPLATE
        return template.format(path=self.path, detail=self.detail)


class ValidationResult(BaseModelWithConfig):
    issue: Optional[ValidationIssue] = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    @property
    def error(self) -> Optional[str]:
        if self.issue is None:
            return None
        return self.issue.message

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, issue: ValidationIssue) -> "ValidationResult":
        return cls(issue=issue)
