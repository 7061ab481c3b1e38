from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

Record = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Envelope returned by the Federal Register search endpoints.

    Attributes:
        count: Total number of matches reported by the API.
        total_pages: Total number of pages at the requested page size.
        results: Records on this page, passed through as JSON mappings.
        extra: Any other top-level keys (``description``, ``next_page_url``...).
    """

    count: int = 0
    total_pages: int = 0
    results: Sequence[Record] = ()
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_payload(cls, payload: Any) -> SearchResult:
        """Build an envelope from a decoded JSON response.

        Missing ``results`` (the API omits it for zero matches) becomes an
        empty sequence; non-mapping items are dropped.

        Args:
            payload: Decoded JSON body.

        Returns:
            Parsed search envelope.
        """
        if not isinstance(payload, Mapping):
            return cls()
        raw_results = payload.get("results") or []
        results = [item for item in raw_results if isinstance(item, Mapping)] if isinstance(raw_results, list) else []
        extra = {k: v for k, v in payload.items() if k not in ("count", "total_pages", "results")}
        return cls(
            count=_as_int(payload.get("count")),
            total_pages=_as_int(payload.get("total_pages")),
            results=results,
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping."""
        out: dict[str, Any] = {
            "count": self.count,
            "total_pages": self.total_pages,
            "results": [dict(record) for record in self.results],
        }
        out.update(self.extra)
        return out


@dataclass(frozen=True, slots=True)
class ExecutiveOrderFullText:
    """Executive order metadata together with its plain-text body.

    ``full_text`` is ``None`` when the document carries no raw text locator;
    ``error`` then explains why.
    """

    executive_order_number: int
    title: str
    document_number: Optional[str] = None
    signing_date: Optional[str] = None
    president: Optional[Mapping[str, Any]] = None
    abstract: Optional[str] = None
    full_text: Optional[str] = None
    error: Optional[str] = None
    html_url: Optional[str] = None
    pdf_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping; ``error`` only when set."""
        out: dict[str, Any] = {
            "executive_order_number": self.executive_order_number,
            "document_number": self.document_number,
            "title": self.title,
            "signing_date": self.signing_date,
            "president": dict(self.president) if self.president is not None else None,
            "abstract": self.abstract,
            "full_text": self.full_text,
            "html_url": self.html_url,
            "pdf_url": self.pdf_url,
        }
        if self.error:
            out["error"] = self.error
        return out


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value))
    except (TypeError, ValueError):
        return 0
