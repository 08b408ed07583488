"""Application filtering – FilterKind, RangeValue, FilterSpec, FilterState."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

from tableview.kernel.errors import InvalidFilterError
from tableview.kernel.types import ValueKind, classify, coerce_datetime

ALL = "all"


class FilterKind(str, Enum):
    TEXT = "text"
    EXACT = "exact"
    SET = "set"
    RANGE = "range"
    BOOLEAN = "boolean"


def is_no_selection(value: Any) -> bool:
    """``None``, ``""`` and the ``"all"`` sentinel never constrain anything."""
    return value is None or (isinstance(value, str) and value in ("", ALL))


@dataclasses.dataclass(frozen=True)
class RangeValue:
    """Inclusive range; a missing bound leaves that side open."""
    start: Any = None
    end: Any = None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> "RangeValue":
        return cls(start=value.get("start"), end=value.get("end"))


def _is_range_mapping(value: Any) -> bool:
    return isinstance(value, Mapping) and ("start" in value or "end" in value)


def _normalise_bound(key: str, bound: Any) -> tuple[Any, ValueKind | None]:
    if bound is None or (isinstance(bound, str) and not bound.strip()):
        return None, None
    kind = classify(bound)
    if kind is ValueKind.NUMBER:
        return bound, kind
    as_date = coerce_datetime(bound)
    if as_date is None:
        raise InvalidFilterError(key, f"range bound {bound!r} is neither a number nor a date")
    return as_date, ValueKind.DATE


def _normalise_range(key: str, value: Any) -> RangeValue:
    if _is_range_mapping(value):
        value = RangeValue.from_mapping(value)
    if not isinstance(value, RangeValue):
        raise InvalidFilterError(key, "range filters need a RangeValue or a start/end mapping")
    start, start_kind = _normalise_bound(key, value.start)
    end, end_kind = _normalise_bound(key, value.end)
    if start_kind and end_kind and start_kind is not end_kind:
        raise InvalidFilterError(key, "range bounds mix numbers and dates")
    return RangeValue(start=start, end=end)


def _normalise_boolean(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise InvalidFilterError(key, f"boolean filters need True/False, got {value!r}")


@dataclasses.dataclass(frozen=True)
class FilterSpec:
    """A single field constraint.

    The value is normalised per kind on construction: SET values become a
    tuple, RANGE values a :class:`RangeValue` with parsed bounds and
    BOOLEAN values a ``bool``.  No-selection markers are kept as given.
    """

    key: str
    kind: FilterKind
    value: Any = None

    def __post_init__(self) -> None:
        if not self.key:
            raise InvalidFilterError(self.key, "key must not be empty")
        try:
            kind = FilterKind(self.kind)
        except ValueError as exc:
            raise InvalidFilterError(self.key, f"unknown kind {self.kind!r}") from exc
        object.__setattr__(self, "kind", kind)
        if is_no_selection(self.value):
            return

        value = self.value
        match kind:
            case FilterKind.SET:
                if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
                    raise InvalidFilterError(self.key, "set filters need a collection of values")
                value = tuple(value)
            case FilterKind.RANGE:
                value = _normalise_range(self.key, value)
            case FilterKind.BOOLEAN:
                value = _normalise_boolean(self.key, value)
        object.__setattr__(self, "value", value)

    @property
    def is_noop(self) -> bool:
        if is_no_selection(self.value):
            return True
        if self.kind is FilterKind.SET:
            return len(self.value) == 0
        if self.kind is FilterKind.RANGE:
            return self.value.is_empty
        return False

    @classmethod
    def infer(cls, key: str, value: Any) -> "FilterSpec":
        """Pick a kind from the shape of *value*.

        TEXT is never inferred: a bare string is an exact match.
        """
        if isinstance(value, bool):
            kind = FilterKind.BOOLEAN
        elif isinstance(value, (list, tuple, set, frozenset)):
            kind = FilterKind.SET
        elif isinstance(value, RangeValue) or _is_range_mapping(value):
            kind = FilterKind.RANGE
        else:
            kind = FilterKind.EXACT
        return cls(key=key, kind=kind, value=value)


class FilterState:
    """Immutable, ordered set of active filters keyed by field.

    Iteration (and therefore evaluation) follows insertion order.
    Replacing a key keeps its original position.
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: Iterable[FilterSpec] = ()) -> None:
        ordered: dict[str, FilterSpec] = {}
        for spec in specs:
            ordered[spec.key] = spec
        self._specs = ordered

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> "FilterState":
        return cls(
            v if isinstance(v, FilterSpec) else FilterSpec.infer(k, v)
            for k, v in values.items()
        )

    def with_filter(self, spec: FilterSpec) -> "FilterState":
        return FilterState([*self._specs.values(), spec])

    def without(self, key: str) -> "FilterState":
        return FilterState(s for k, s in self._specs.items() if k != key)

    def cleared(self) -> "FilterState":
        return FilterState()

    def get(self, key: str) -> FilterSpec | None:
        return self._specs.get(key)

    def active(self) -> list[FilterSpec]:
        return [s for s in self._specs.values() if not s.is_noop]

    @property
    def active_count(self) -> int:
        return len(self.active())

    @property
    def is_active(self) -> bool:
        return any(not s.is_noop for s in self._specs.values())

    def to_values(self) -> dict[str, Any]:
        return {k: s.value for k, s in self._specs.items()}

    def __iter__(self) -> Iterator[FilterSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, key: object) -> bool:
        return key in self._specs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterState):
            return NotImplemented
        return self._specs == other._specs

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._specs)))

    def __repr__(self) -> str:
        return f"FilterState({list(self._specs.values())!r})"


__all__ = [
    "ALL",
    "FilterKind",
    "FilterSpec",
    "FilterState",
    "RangeValue",
    "is_no_selection",
]
