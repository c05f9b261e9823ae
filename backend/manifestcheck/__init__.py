"""Error vocabulary and result aggregation for manifest bundle checks."""

from manifestcheck.exceptions import InvalidFailurePolicy, ManifestCheckError, UnrecognizedErrorKind
from manifestcheck.validators import (
    BaseValidator,
    ErrorKind,
    ManifestResult,
    ValidationError,
    ValidationSummary,
    Validator,
    ValidatorSet,
    new_validator_set,
)

__version__ = "1.0.0"

__all__ = [
    "BaseValidator",
    "ErrorKind",
    "InvalidFailurePolicy",
    "ManifestCheckError",
    "ManifestResult",
    "UnrecognizedErrorKind",
    "ValidationError",
    "ValidationSummary",
    "Validator",
    "ValidatorSet",
    "new_validator_set",
]
