"""Manifest validation core: error vocabulary and validator aggregation.

Usage:
    from manifestcheck.validators import ValidatorSet, ValidationSummary

    results = ValidatorSet(csv_validator, channel_validator).validate_all()
    if not ValidationSummary.build(results).passed:
        # Render results[i].errors for the user
"""

from manifestcheck.validators.base import BaseValidator, Validator
from manifestcheck.validators.engine import ValidatorSet, new_validator_set
from manifestcheck.validators.models import (
    ErrorKind,
    ManifestResult,
    ValidationError,
    ValidationSummary,
    describe_kind,
    failed_validation,
    invalid_csv,
    invalid_default_channel,
    invalid_document,
    invalid_operation,
    invalid_parse,
    io_error,
    mandatory_field_missing,
    optional_field_missing,
    unsupported_type,
)

__all__ = [
    "BaseValidator",
    "Validator",
    "ValidatorSet",
    "new_validator_set",
    "ErrorKind",
    "ManifestResult",
    "ValidationError",
    "ValidationSummary",
    "describe_kind",
    "failed_validation",
    "invalid_csv",
    "invalid_default_channel",
    "invalid_document",
    "invalid_operation",
    "invalid_parse",
    "io_error",
    "mandatory_field_missing",
    "optional_field_missing",
    "unsupported_type",
]
