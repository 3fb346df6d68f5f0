"""Validation Engine: composable, immutable validators that collect violations.

A validator is a pure check from an input value to a list of violations.
Small validators (bounds, presence) are combined into record-level
validators with concat() and lift_map(); nothing ever raises, every
problem is returned as a value.

Usage:
    temperature = required(TemperatureError.NOT_NUMBER,
                           min_bound(TemperatureError.BELOW_ABSOLUTE_ZERO, -273.15))
    form = concat([lift_map(TemperatureIssue, attrgetter("temperature"), temperature)])
    violations = run(form, record)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, Optional, TypeVar

I = TypeVar("I")
E = TypeVar("E")
R = TypeVar("R")
F = TypeVar("F")
S = TypeVar("S")


@dataclass(frozen=True)
class Validator(Generic[I, E]):
    """A pure check over values of type I producing violations of type E.

    Contract:
        - run() is deterministic: same input → same output
        - run() returns a fresh list on every call (empty = valid)
        - run() never raises for a well-typed input
    """

    check: Callable[[I], Iterable[E]]

    def run(self, value: I) -> list[E]:
        return list(self.check(value))

    def is_valid(self, value: I) -> bool:
        return not self.run(value)


class BoundKind(str, Enum):
    """Which side of a threshold a bound guards."""

    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class Bound(Generic[E]):
    """Numeric limit plus the violation reported when it is crossed.

    The threshold itself is always accepted.
    """

    kind: BoundKind
    threshold: float
    report: E

    def __call__(self, value: float) -> list[E]:
        if self.kind is BoundKind.MIN and value < self.threshold:
            return [self.report]
        if self.kind is BoundKind.MAX and value > self.threshold:
            return [self.report]
        return []


# ── Primitives ──


def min_bound(report: E, threshold: float) -> Validator[float, E]:
    """Report `report` for values strictly below `threshold`."""
    return Validator(Bound(BoundKind.MIN, threshold, report))


def max_bound(report: E, threshold: float) -> Validator[float, E]:
    """Report `report` for values strictly above `threshold`."""
    return Validator(Bound(BoundKind.MAX, threshold, report))


# ── Presence ──


def required(missing_report: E, inner: Validator[float, E]) -> Validator[Optional[float], E]:
    """Absent value → exactly [missing_report]; present value → inner's violations."""

    def check(value: Optional[float]) -> list[E]:
        if value is None:
            return [missing_report]
        return inner.run(value)

    return Validator(check)


def optional(inner: Validator[float, E]) -> Validator[Optional[float], E]:
    """Absent value is fine; present value → inner's violations."""

    def check(value: Optional[float]) -> list[E]:
        if value is None:
            return []
        return inner.run(value)

    return Validator(check)


def _no_violations(value) -> list:
    return []


# Always valid, for field categories without checks
succeed: Validator = Validator(_no_violations)


# ── Composition ──


def concat(validators: Iterable[Validator[I, E]]) -> Validator[I, E]:
    """Run every validator on the same input and chain the results in order.

    Every branch is evaluated; violations are neither interleaved nor
    deduplicated. An empty sequence yields a validator that always passes.
    """
    chain = tuple(validators)
    if not chain:
        return succeed

    def check(value: I) -> list[E]:
        violations: list[E] = []
        for validator in chain:
            violations.extend(validator.run(value))
        return violations

    return Validator(check)


def lift_map(
    wrap: Callable[[S], E],
    accessor: Callable[[R], F],
    inner: Validator[F, S],
) -> Validator[R, E]:
    """Promote a field validator to a record validator.

    Args:
        wrap: Injects a field violation into the record-level violation type
        accessor: Extracts the field value from the record
        inner: Validator over the field value

    Returns:
        Validator over the record whose violations are inner's, re-tagged by wrap
    """

    def check(record: R) -> list[E]:
        return [wrap(violation) for violation in inner.run(accessor(record))]

    return Validator(check)


# ── Queries ──


def run(validator: Validator[I, E], value: I) -> list[E]:
    """All violations of `validator` for `value`, in declaration order."""
    return validator.run(value)


def is_valid(validator: Validator[I, E], value: I) -> bool:
    """True when `validator` reports nothing for `value`."""
    return not run(validator, value)
