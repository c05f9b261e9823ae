"""Validation models — error kinds, findings, per-manifest results and summaries.

Findings are plain data: validators return them inside a ManifestResult and
nothing here raises them. Whether a finding is an error or a warning is decided
by the list it is placed in, never by its kind.
"""

from enum import Enum
from typing import Any
from pydantic import BaseModel, Field

from manifestcheck.exceptions import UnrecognizedErrorKind


class ErrorKind(str, Enum):
    """Categories of problems a manifest check can report.

    Values are the wire-stable type names; use ``description`` for the
    human-readable message.
    """

    INVALID_CSV = "CSVFileNotValid"
    OPTIONAL_FIELD_MISSING = "OptionalFieldNotFound"
    MANDATORY_FIELD_MISSING = "MandatoryFieldNotFound"
    UNSUPPORTED_TYPE = "FieldTypeNotSupported"
    INVALID_PARSE = "Unmarshall/ParseError"
    IO = "FileReadError"
    FAILED_VALIDATION = "ValidationFailed"
    INVALID_OPERATION = "OperationFailed"
    INVALID_DEFAULT_CHANNEL = "DefaultChannelNotValid"

    @property
    def description(self) -> str:
        return describe_kind(self)

    @property
    def category(self) -> str:
        return KIND_CATEGORY_MAP[self]


# Canonical message for every kind
KIND_DESCRIPTIONS = {
    ErrorKind.INVALID_CSV: "CSV file not valid",
    ErrorKind.OPTIONAL_FIELD_MISSING: "Optional field not found",
    ErrorKind.MANDATORY_FIELD_MISSING: "Mandatory field not found",
    ErrorKind.UNSUPPORTED_TYPE: "Field type not supported",
    ErrorKind.INVALID_PARSE: "Unmarshall/Parse error",
    ErrorKind.IO: "File read error",
    ErrorKind.FAILED_VALIDATION: "Validation failed",
    ErrorKind.INVALID_OPERATION: "Operation failed",
    ErrorKind.INVALID_DEFAULT_CHANNEL: "Default channel not found",
}

# Informal grouping, carries no severity
KIND_CATEGORY_MAP = {
    # Document structure
    ErrorKind.INVALID_CSV: "document",
    ErrorKind.UNSUPPORTED_TYPE: "document",
    ErrorKind.INVALID_PARSE: "document",
    ErrorKind.IO: "document",

    # Field presence
    ErrorKind.OPTIONAL_FIELD_MISSING: "field",
    ErrorKind.MANDATORY_FIELD_MISSING: "field",

    # Semantic
    ErrorKind.FAILED_VALIDATION: "semantic",
    ErrorKind.INVALID_OPERATION: "semantic",
    ErrorKind.INVALID_DEFAULT_CHANNEL: "semantic",
}


def describe_kind(kind: Any) -> str:
    """Return the canonical description of ``kind``.

    Accepts an ErrorKind or its string value. Anything else is a programming
    error and raises UnrecognizedErrorKind.
    """
    try:
        return KIND_DESCRIPTIONS[ErrorKind(kind)]
    except (ValueError, KeyError, TypeError):
        raise UnrecognizedErrorKind(kind) from None


class ValidationError(BaseModel):
    """A single finding about a manifest.

    Rendering:
        terse()   -> detail, verbatim
        verbose() -> "Error type: <description> | Field: <field> | Value: <bad_value> | Detail: <detail>"
    """

    kind: ErrorKind
    field: str = ""          # Dot-hierarchical path, empty when not field-specific
    bad_value: Any = ""      # Offending value or file
    detail: str = ""

    model_config = {"frozen": True}

    def terse(self) -> str:
        return self.detail

    def verbose(self) -> str:
        return (
            f"Error type: {describe_kind(self.kind)} | "
            f"Field: {self.field} | "
            f"Value: {self.bad_value} | "
            f"Detail: {self.detail}"
        )

    def __str__(self) -> str:
        return self.terse()

    def __hash__(self) -> int:
        # bad_value may be a mapping or list
        return hash((self.kind, self.field, repr(self.bad_value), self.detail))


# ── Constructors ──
# Total over their arguments: no validation, None becomes "".

def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _finding(kind: ErrorKind, detail: Any, field: Any = "", value: Any = "") -> ValidationError:
    return ValidationError.model_construct(kind=kind, field=_text(field), bad_value=value, detail=_text(detail))


def invalid_csv(detail: str) -> ValidationError:
    return _finding(ErrorKind.INVALID_CSV, detail)


invalid_document = invalid_csv


def invalid_default_channel(detail: str, value: Any) -> ValidationError:
    return _finding(ErrorKind.INVALID_DEFAULT_CHANNEL, detail, value=value)


def optional_field_missing(detail: str, field: str, value: Any) -> ValidationError:
    return _finding(ErrorKind.OPTIONAL_FIELD_MISSING, detail, field, value)


def mandatory_field_missing(detail: str, field: str, value: Any) -> ValidationError:
    return _finding(ErrorKind.MANDATORY_FIELD_MISSING, detail, field, value)


def unsupported_type(detail: str) -> ValidationError:
    return _finding(ErrorKind.UNSUPPORTED_TYPE, detail)


def invalid_parse(detail: str, value: Any) -> ValidationError:
    return _finding(ErrorKind.INVALID_PARSE, detail, value=value)


def io_error(detail: str, value: Any) -> ValidationError:
    return _finding(ErrorKind.IO, detail, value=value)


def failed_validation(detail: str, value: Any) -> ValidationError:
    return _finding(ErrorKind.FAILED_VALIDATION, detail, value=value)


def invalid_operation(detail: str, value: Any) -> ValidationError:
    return _finding(ErrorKind.INVALID_OPERATION, detail, value=value)


class ManifestResult(BaseModel):
    """Outcome of checking one manifest.

    Both lists empty means no issues were found; the result is still emitted.
    """

    name: str
    errors: list[ValidationError] = Field(default_factory=list)    # Must be corrected
    warnings: list[ValidationError] = Field(default_factory=list)  # Optional to correct

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def is_clean(self) -> bool:
        return not self.errors and not self.warnings


class ValidationSummary(BaseModel):
    """Roll-up of a validation run for presentation layers."""

    passed: bool = Field(description="True if no result carries errors")
    manifest_count: int = 0
    error_count: int = 0
    warning_count: int = 0
    failed_manifests: list[str] = Field(default_factory=list)
    results: list[ManifestResult] = Field(default_factory=list)

    @classmethod
    def build(cls, results: list[ManifestResult]) -> "ValidationSummary":
        """Build a summary from aggregated results, leaving them untouched."""
        error_count = sum(len(r.errors) for r in results)
        warning_count = sum(len(r.warnings) for r in results)

        return cls(
            passed=error_count == 0,
            manifest_count=len(results),
            error_count=error_count,
            warning_count=warning_count,
            failed_manifests=[r.name for r in results if r.errors],
            results=list(results),
        )
