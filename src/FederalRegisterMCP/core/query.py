from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Union


@dataclass(frozen=True, slots=True)
class Scalar:
    """Single condition value, encoded as ``conditions[key]=value``."""

    value: Any


@dataclass(frozen=True, slots=True)
class Multi:
    """Repeated condition values, encoded as ``conditions[key][]=value`` per item.

    An empty sequence encodes nothing.
    """

    values: Sequence[Any] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


@dataclass(frozen=True, slots=True)
class Nested:
    """Sub-keyed condition value, encoded as ``conditions[key][sub]=value``.

    Typical use is a date range (``gte``/``lte``/``is``/``year``). Sub-keys with
    a ``None`` value are skipped; an empty mapping encodes nothing.
    """

    items: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", MappingProxyType(dict(self.items)))


ConditionValue = Union[Scalar, Multi, Nested]


@dataclass(frozen=True, slots=True)
class DocumentQuery:
    """Normalized filter, field selection and paging controls for one request.

    The variant of each condition is chosen explicitly by the caller; the query
    compiler never inspects raw value shapes.

    Attributes:
        conditions: Ordered mapping of condition name to condition value.
        fields: Ordered field names to return. Empty means all fields.
        per_page: Page size; omitted when ``None`` or zero.
        page: Page number (1-based); omitted when ``None`` or zero.
        order: Sort order such as ``newest``, ``oldest``, ``relevance`` or
            ``executive_order_number``.
        format: Response format override.
    """

    conditions: Mapping[str, ConditionValue] = field(default_factory=dict)
    fields: Sequence[str] = ()
    per_page: int | None = None
    page: int | None = None
    order: str | None = None
    format: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", MappingProxyType(dict(self.conditions)))
        object.__setattr__(self, "fields", tuple(self.fields))


def date_range(*, gte: str | None = None, lte: str | None = None, year: int | None = None) -> Nested | None:
    """Build a nested date condition, or ``None`` when no bound is given.

    Args:
        gte: Inclusive lower bound (``YYYY-MM-DD``).
        lte: Inclusive upper bound (``YYYY-MM-DD``).
        year: Exact year.

    Returns:
        A ``Nested`` condition holding only the bounds that were provided.
    """
    items = {key: value for key, value in (("year", year), ("gte", gte), ("lte", lte)) if value}
    return Nested(items) if items else None
