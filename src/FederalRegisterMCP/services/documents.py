"""Federal Register service layer.

Maps each API operation onto an endpoint of the remote API and composes the
convenience operations (executive order lookup, full text, recent orders).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Protocol, Sequence

from FederalRegisterMCP.core import constants
from FederalRegisterMCP.core.fields import (
    EXECUTIVE_ORDER_DETAIL_FIELDS,
    EXECUTIVE_ORDER_SEARCH_FIELDS,
    EXECUTIVE_ORDER_TEXT_FIELDS,
    PRESIDENTIAL_DOCUMENT_FIELDS,
)
from FederalRegisterMCP.core.models import ExecutiveOrderFullText, Record, SearchResult
from FederalRegisterMCP.core.query import ConditionValue, DocumentQuery, Scalar, date_range
from FederalRegisterMCP.services.pagination import collect_all_results
from FederalRegisterMCP.utils.log import log

FULL_TEXT_UNAVAILABLE = "Full text not available for this executive order"


class FederalRegisterClient(Protocol):
    """Protocol for the HTTP client the service talks through."""

    def get_json(self, endpoint: str, query: DocumentQuery | None = None) -> Any:
        """GET an API endpoint and decode JSON."""
        raise NotImplementedError

    def fetch_text(self, url: str) -> str:
        """Fetch a plain-text document body."""
        raise NotImplementedError

    def fetch_html(self, url: str) -> str:
        """Fetch an HTML document body."""
        raise NotImplementedError

    def close(self) -> None:
        """Release network resources."""
        raise NotImplementedError


@dataclass(slots=True)
class FederalRegisterService:
    """Application service exposing Federal Register documents and agencies.

    Every call builds its own query and returns independently; nothing is
    cached between calls.
    """

    client: FederalRegisterClient

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def get_document(self, document_number: str, fields: Sequence[str] | None = None) -> Record:
        """Fetch one document by its document number (``YYYY-NNNNN``)."""
        return self.client.get_json(f"/documents/{document_number}.json", _fields_query(fields))

    def get_documents(self, document_numbers: Sequence[str], fields: Sequence[str] | None = None) -> Record:
        """Fetch several documents in one request.

        Returns:
            Payload of the form ``{"results": [...]}``.
        """
        numbers = ",".join(document_numbers)
        return self.client.get_json(f"/documents/{numbers}.json", _fields_query(fields))

    def search_documents(self, query: DocumentQuery) -> SearchResult:
        """Search all published documents."""
        return SearchResult.from_payload(self.client.get_json("/documents.json", query))

    def fetch_document_text(self, raw_text_url: str) -> str:
        """Fetch the plain-text body behind a document's ``raw_text_url``."""
        return self.client.fetch_text(raw_text_url)

    def fetch_document_html(self, body_html_url: str) -> str:
        """Fetch the HTML body behind a document's ``body_html_url``."""
        return self.client.fetch_html(body_html_url)

    # ------------------------------------------------------------------
    # Executive orders
    # ------------------------------------------------------------------

    def search_executive_orders(
        self,
        *,
        president: str | None = None,
        year: int | None = None,
        term: str | None = None,
        signing_date_gte: str | None = None,
        signing_date_lte: str | None = None,
        fields: Sequence[str] | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> SearchResult:
        """Search executive orders, ordered by executive order number.

        Args:
            president: President slug, e.g. ``joe-biden``.
            year: Publication year.
            term: Full-text search term.
            signing_date_gte: Signing date lower bound (``YYYY-MM-DD``).
            signing_date_lte: Signing date upper bound (``YYYY-MM-DD``).
            fields: Fields to return; defaults to ``EXECUTIVE_ORDER_SEARCH_FIELDS``.
            per_page: Page size (default 100).
            page: Page number (default 1).

        Returns:
            One page of matching executive orders.
        """
        conditions = _presidential_conditions(constants.EXECUTIVE_ORDER, president=president, year=year, term=term)
        signing_date = date_range(gte=signing_date_gte, lte=signing_date_lte)
        if signing_date is not None:
            conditions["signing_date"] = signing_date

        return self.search_documents(
            DocumentQuery(
                conditions=conditions,
                fields=fields or EXECUTIVE_ORDER_SEARCH_FIELDS,
                per_page=per_page or constants.DEFAULT_PER_PAGE,
                page=page or 1,
                order="executive_order_number",
            )
        )

    def get_executive_order_by_number(
        self,
        eo_number: int,
        fields: Sequence[str] | None = None,
    ) -> Record | None:
        """Find an executive order by its EO number.

        The API has no direct lookup by EO number, so this runs a full-text
        search for the number and keeps the record whose
        ``executive_order_number`` matches exactly. Only the first page of 100
        matches is inspected: an order ranked below that is reported missing.

        Args:
            eo_number: Executive order number, e.g. ``14067``.
            fields: Fields to return; defaults to ``EXECUTIVE_ORDER_DETAIL_FIELDS``.

        Returns:
            The matching record, or ``None`` when not found.
        """
        target = int(eo_number)
        conditions = _presidential_conditions(constants.EXECUTIVE_ORDER, term=str(eo_number))
        response = self.search_documents(
            DocumentQuery(
                conditions=conditions,
                fields=fields or EXECUTIVE_ORDER_DETAIL_FIELDS,
                per_page=constants.DEFAULT_PER_PAGE,
            )
        )
        for record in response.results:
            if _as_eo_number(record.get("executive_order_number")) == target:
                return record

        log.info("Executive order %s not found among %d search results", eo_number, len(response.results))
        return None

    def get_executive_orders_by_president(
        self,
        president: str,
        fields: Sequence[str] | None = None,
        *,
        max_results: int = constants.MAX_TOTAL_RESULTS,
    ) -> list[Record]:
        """Collect all executive orders of one president across pages."""

        def search(query: DocumentQuery) -> SearchResult:
            return self.search_executive_orders(
                president=president,
                fields=fields,
                per_page=query.per_page,
                page=query.page,
            )

        return collect_all_results(
            search,
            DocumentQuery(per_page=constants.MAX_PER_PAGE),
            max_results=max_results,
        )

    def get_recent_executive_orders(
        self,
        fields: Sequence[str] | None = None,
        *,
        days: int = constants.RECENT_DAYS,
        today: date | None = None,
    ) -> SearchResult:
        """Search executive orders signed in the last ``days`` days.

        Args:
            fields: Fields to return; defaults to ``EXECUTIVE_ORDER_SEARCH_FIELDS``.
            days: Window size in calendar days.
            today: Reference date; defaults to the current UTC date.
        """
        return self.search_executive_orders(
            signing_date_gte=recent_floor_date(days, today=today),
            fields=fields,
        )

    def get_executive_order_full_text(self, eo_number: int) -> ExecutiveOrderFullText | None:
        """Fetch an executive order together with its plain-text body.

        Resolves the order by number, re-fetches the document for its
        ``raw_text_url`` and downloads that text.

        Returns:
            Full text result; ``full_text`` is ``None`` with an ``error`` note
            when no text locator exists. ``None`` when the order is not found.
        """
        order = self.get_executive_order_by_number(eo_number)
        if order is None:
            return None

        document = self.get_document(str(order.get("document_number")), EXECUTIVE_ORDER_TEXT_FIELDS)
        raw_text_url = document.get("raw_text_url")

        full_text = None
        error = None
        if raw_text_url:
            full_text = self.fetch_document_text(raw_text_url)
        else:
            log.info("Executive order %s has no raw_text_url", eo_number)
            error = FULL_TEXT_UNAVAILABLE

        return ExecutiveOrderFullText(
            executive_order_number=int(eo_number),
            document_number=document.get("document_number"),
            title=document.get("title") or "",
            signing_date=document.get("signing_date"),
            president=document.get("president"),
            abstract=document.get("abstract"),
            full_text=full_text,
            error=error,
            html_url=document.get("html_url"),
            pdf_url=document.get("pdf_url"),
        )

    # ------------------------------------------------------------------
    # Other presidential documents
    # ------------------------------------------------------------------

    def search_presidential_memoranda(self, **options: Any) -> SearchResult:
        """Search presidential memoranda (president, year, term, fields, per_page, page)."""
        return self._search_presidential(constants.MEMORANDUM, **options)

    def search_proclamations(self, **options: Any) -> SearchResult:
        """Search presidential proclamations (president, year, term, fields, per_page, page)."""
        return self._search_presidential(constants.PROCLAMATION, **options)

    def _search_presidential(
        self,
        document_type: str,
        *,
        president: str | None = None,
        year: int | None = None,
        term: str | None = None,
        fields: Sequence[str] | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> SearchResult:
        conditions = _presidential_conditions(document_type, president=president, year=year, term=term)
        return self.search_documents(
            DocumentQuery(
                conditions=conditions,
                fields=fields or PRESIDENTIAL_DOCUMENT_FIELDS,
                per_page=per_page or constants.DEFAULT_PER_PAGE,
                page=page or 1,
            )
        )

    # ------------------------------------------------------------------
    # Public inspection
    # ------------------------------------------------------------------

    def get_public_inspection_documents(self, fields: Sequence[str] | None = None) -> Record:
        """Documents currently on public inspection (published next business day)."""
        return self.client.get_json("/public-inspection-documents/current.json", _fields_query(fields))

    def get_public_inspection_by_date(self, date_str: str, fields: Sequence[str] | None = None) -> Record:
        """Documents that were on public inspection on ``date_str`` (``YYYY-MM-DD``)."""
        return self.client.get_json(f"/public-inspection-documents/{date_str}.json", _fields_query(fields))

    def get_public_inspection_document(self, document_number: str) -> Record:
        """Fetch one public inspection document by document number."""
        return self.client.get_json(f"/public-inspection-documents/{document_number}.json")

    def search_public_inspection(self, query: DocumentQuery) -> SearchResult:
        """Search documents currently on public inspection."""
        return SearchResult.from_payload(self.client.get_json("/public-inspection-documents.json", query))

    # ------------------------------------------------------------------
    # Agencies
    # ------------------------------------------------------------------

    def get_agencies(self) -> list[Record]:
        """List every agency known to the Federal Register."""
        payload = self.client.get_json("/agencies.json")
        return list(payload) if isinstance(payload, list) else []

    def get_agency(self, slug: str) -> Record:
        """Fetch one agency by slug, e.g. ``environmental-protection-agency``."""
        return self.client.get_json(f"/agencies/{slug}.json")

    def close(self) -> None:
        """Close the underlying client."""
        self.client.close()


def recent_floor_date(days: int = constants.RECENT_DAYS, *, today: date | None = None) -> str:
    """Return the date ``days`` calendar days before ``today`` as ``YYYY-MM-DD``."""
    reference = today or datetime.now(timezone.utc).date()
    return (reference - timedelta(days=days)).isoformat()


def _presidential_conditions(
    document_type: str,
    *,
    president: str | None = None,
    year: int | None = None,
    term: str | None = None,
) -> dict[str, ConditionValue]:
    """Base conditions for one presidential document subtype, corrections excluded."""
    conditions: dict[str, ConditionValue] = {
        "type": Scalar(constants.PRESIDENTIAL_DOCUMENT),
        "presidential_document_type": Scalar(document_type),
        "correction": Scalar(0),
    }
    if president:
        conditions["president"] = Scalar(president)
    publication_date = date_range(year=year)
    if publication_date is not None:
        conditions["publication_date"] = publication_date
    if term:
        conditions["term"] = Scalar(term)
    return conditions


def _fields_query(fields: Sequence[str] | None) -> DocumentQuery | None:
    return DocumentQuery(fields=fields) if fields else None


def _as_eo_number(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None
