"""Fault types raised by manifestcheck.

Validation findings are never raised; they travel as data inside a
ManifestResult. The classes here signal programming errors only.
"""


class ManifestCheckError(Exception):
    """Base class for manifestcheck faults."""


class UnrecognizedErrorKind(ManifestCheckError, ValueError):
    """An error kind outside the known taxonomy reached a renderer."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"Unrecognized validation error: {str(kind)!r}")


class InvalidFailurePolicy(ManifestCheckError, ValueError):
    """A ValidatorSet was given a failure policy it does not know."""

    def __init__(self, policy: object):
        self.policy = policy
        super().__init__(
            f"Unknown validator failure policy {policy!r}; expected 'abort' or 'isolate'"
        )
