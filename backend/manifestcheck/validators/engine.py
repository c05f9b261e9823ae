"""Validator Set — registers manifest checks and aggregates their results.

Usage:
    validators = ValidatorSet(CSVValidator(bundle), ChannelValidator(bundle))
    validators.add_validators(CRDValidator(bundle))
    results = validators.validate_all()
    summary = ValidationSummary.build(results)

Results are the concatenation of each validator's output in registration
order. Nothing is sorted, merged or deduplicated.

A ValidatorSet is not safe for concurrent mutation: calling add_validators
from several threads, or while validate_all runs, needs external locking.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional

import structlog

from manifestcheck.config import get_settings
from manifestcheck.exceptions import InvalidFailurePolicy
from manifestcheck.validators.base import Validator
from manifestcheck.validators.models import ManifestResult, invalid_operation

logger = structlog.get_logger()

FAILURE_POLICIES = ("abort", "isolate")


class ValidatorSet:
    """Ordered, name-deduplicated collection of validators.

    Validators must return their findings; a validator that raises either
    aborts the whole run ("abort", the default) or is turned into a single
    operation-failed result at its position ("isolate").
    """

    def __init__(
        self,
        *validators: Validator,
        failure_policy: Optional[str] = None,
        max_workers: Optional[int] = None,
    ):
        """Create a set and register ``validators`` in order.

        Args:
            validators: Initial validators, deduplicated by name
            failure_policy: "abort" or "isolate". Defaults to settings.
            max_workers: Threads used by validate_all. 1 runs sequentially.
        """
        settings = get_settings()
        if failure_policy is None:
            failure_policy = settings.VALIDATOR_FAILURE_POLICY
        if failure_policy not in FAILURE_POLICIES:
            raise InvalidFailurePolicy(failure_policy)
        self.failure_policy = failure_policy
        if max_workers is None:
            max_workers = settings.VALIDATOR_MAX_WORKERS
        self.max_workers = max(1, max_workers)

        self._validators: list[Validator] = []
        self._seen_names: set[str] = set()
        self.add_validators(*validators)

    def add_validators(self, *validators: Validator) -> None:
        """Add each validator whose name is not registered yet.

        The first validator registered under a name wins; later ones are
        dropped without error.
        """
        for validator in validators:
            name = validator.name
            if name in self._seen_names:
                logger.debug("validator_skipped_duplicate", validator=name)
                continue
            self._validators.append(validator)
            self._seen_names.add(name)

    @property
    def validators(self) -> tuple[Validator, ...]:
        return tuple(self._validators)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(v.name for v in self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self) -> Iterator[Validator]:
        return iter(tuple(self._validators))

    def __contains__(self, name: object) -> bool:
        return name in self._seen_names

    def validate_all(self) -> list[ManifestResult]:
        """Run every validator and return all of their results.

        Returns:
            Results of the first validator, then the second, and so on,
            each in the order its validator returned them. Empty list if
            there is nothing to report.
        """
        start_time = time.perf_counter()
        validators = list(self._validators)
        validator_timings: dict[str, float] = {}

        if self.max_workers > 1 and len(validators) > 1:
            # Slots keep registration order regardless of completion order
            slots: list[list[ManifestResult]] = [[] for _ in validators]
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = [
                    executor.submit(self._run_one, validator, validator_timings)
                    for validator in validators
                ]
                for index, future in enumerate(futures):
                    slots[index] = future.result()
        else:
            slots = [self._run_one(validator, validator_timings) for validator in validators]

        all_results: list[ManifestResult] = []
        for results in slots:
            all_results.extend(results)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            validator_count=len(validators),
            result_count=len(all_results),
            error_count=sum(len(r.errors) for r in all_results),
            warning_count=sum(len(r.warnings) for r in all_results),
            duration_ms=round(total_duration, 2),
            validator_timings=validator_timings,
        )

        return all_results

    def _run_one(self, validator: Validator, timings: dict[str, float]) -> list[ManifestResult]:
        v_start = time.perf_counter()
        try:
            return list(validator.validate())
        except Exception as e:
            if self.failure_policy == "abort":
                raise
            logger.error(
                "validator_failed",
                validator=validator.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return [
                ManifestResult(
                    name=validator.name,
                    errors=[invalid_operation(f"Validator '{validator.name}' crashed: {e}", validator.name)],
                )
            ]
        finally:
            v_duration = (time.perf_counter() - v_start) * 1000
            timings[validator.name] = round(v_duration, 2)


def new_validator_set(*validators: Validator) -> ValidatorSet:
    """Create a ValidatorSet with settings-driven defaults."""
    return ValidatorSet(*validators)
