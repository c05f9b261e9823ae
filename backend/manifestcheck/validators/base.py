"""The Validator capability a ValidatorSet consumes.

Concrete checks live outside this package. Anything with a ``name`` and a
no-argument ``validate()`` returning ManifestResults can be registered;
BaseValidator is a convenience base for checks written against this library.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from manifestcheck.validators.models import ManifestResult, ValidationError


@runtime_checkable
class Validator(Protocol):
    """Structural type for a manifest check."""

    @property
    def name(self) -> str:
        ...

    def validate(self) -> list[ManifestResult]:
        ...


class BaseValidator(ABC):
    """Abstract base for manifest checks.

    Contract:
        - name is stable; a ValidatorSet keeps only the first validator per name
        - validate() closes over its own target manifests, takes no input
        - validate() returns zero or more ManifestResults, one per manifest checked
        - validate() is repeatable: same manifests → same results
        - failures are reported as results (io_error, invalid_operation), not raised
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier, also used for logging."""
        ...

    @abstractmethod
    def validate(self) -> list[ManifestResult]:
        """Run the check.

        Returns:
            One ManifestResult per manifest inspected (empty lists = no issues)
        """
        ...

    # ── Helper Methods ──

    def _result(
        self,
        name: str,
        errors: Optional[list[ValidationError]] = None,
        warnings: Optional[list[ValidationError]] = None,
    ) -> ManifestResult:
        """Convenience method to create a ManifestResult."""
        return ManifestResult(
            name=name,
            errors=list(errors or []),
            warnings=list(warnings or []),
        )
