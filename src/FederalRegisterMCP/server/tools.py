"""MCP tool definitions.

Each tool is a thin wrapper around a ``FederalRegisterService`` operation: it
turns flat, typed tool arguments into service calls and returns either a JSON
payload (dict/list) or a plain-text payload. A lookup miss is answered with a
descriptive text payload, not a protocol error; upstream HTTP failures raise
and surface as tool errors.
"""

from typing import Annotated, Any, Literal

from fastmcp import FastMCP
from pydantic import Field

from FederalRegisterMCP.core.constants import MAX_TOTAL_RESULTS, RECENT_DAYS
from FederalRegisterMCP.core.query import ConditionValue, DocumentQuery, Multi, Scalar, date_range
from FederalRegisterMCP.services.documents import FederalRegisterService
from FederalRegisterMCP.utils.log import log

DocumentType = Literal["RULE", "PRORULE", "NOTICE", "PRESDOCU"]
PresidentialDocumentType = Literal["executive_order", "memorandum", "proclamation", "determination", "notice"]
SortOrder = Literal["relevance", "newest", "oldest", "executive_order_number"]

President = Annotated[
    str | None,
    Field(description='President slug (e.g., "joe-biden", "donald-trump", "barack-obama", "george-w-bush")'),
]
Year = Annotated[int | None, Field(description="Publication year (e.g., 2024)")]
Term = Annotated[str | None, Field(description="Full text search term")]
PerPage = Annotated[int | None, Field(description="Number of results per page (default 100, max 1000)")]
Page = Annotated[int | None, Field(description="Page number for pagination")]
EoNumber = Annotated[int, Field(description="The executive order number (e.g., 14067)")]
Fields = Annotated[
    list[str] | None,
    Field(description='Specific fields to include (e.g., ["title", "abstract", "pdf_url"]). If omitted, returns all fields.'),
]


def _log_call(tool_name: str, **params: Any) -> None:
    shown = ", ".join(f"{key}={value!r}" for key, value in params.items() if value is not None)
    log.info("Tool call: %s(%s)", tool_name, shown)


def _not_found(eo_number: int) -> str:
    return f"Executive order {eo_number} not found."


def build_document_conditions(
    *,
    term: str | None = None,
    document_type: str | None = None,
    presidential_document_type: str | None = None,
    president: str | None = None,
    agency: str | None = None,
    publication_date_gte: str | None = None,
    publication_date_lte: str | None = None,
    publication_year: int | None = None,
) -> dict[str, ConditionValue]:
    """Translate flat search arguments into document search conditions.

    An exact ``publication_year`` takes precedence over a date range.
    """
    conditions: dict[str, ConditionValue] = {}
    if term:
        conditions["term"] = Scalar(term)
    if document_type:
        conditions["type"] = Scalar(document_type)
    if presidential_document_type:
        conditions["presidential_document_type"] = Scalar(presidential_document_type)
    if president:
        conditions["president"] = Scalar(president)
    if agency:
        conditions["agencies"] = Multi((agency,))

    if publication_year:
        publication_date = date_range(year=publication_year)
    else:
        publication_date = date_range(gte=publication_date_gte, lte=publication_date_lte)
    if publication_date is not None:
        conditions["publication_date"] = publication_date
    return conditions


def create_server(
    service: FederalRegisterService,
    *,
    name: str = "federal-register",
    version: str = "1.0.0",
) -> FastMCP:
    """Create the MCP server and register every Federal Register tool.

    Args:
        service: Service the tools delegate to.
        name: Server name advertised to MCP clients.
        version: Server version advertised to MCP clients.

    Returns:
        FastMCP server ready to run on any transport.
    """
    mcp = FastMCP(name, version=version)

    # ------------------------------------------------------------------
    # Executive orders
    # ------------------------------------------------------------------

    @mcp.tool()
    def search_executive_orders(
        president: President = None,
        year: Year = None,
        term: Term = None,
        signing_date_gte: Annotated[
            str | None, Field(description="Signing date greater than or equal to (YYYY-MM-DD format)")
        ] = None,
        signing_date_lte: Annotated[
            str | None, Field(description="Signing date less than or equal to (YYYY-MM-DD format)")
        ] = None,
        per_page: PerPage = None,
        page: Page = None,
    ) -> dict[str, Any]:
        """Search for executive orders by president, year, date range, or keyword.

        Returns a list of matching executive orders with metadata including
        title, signing date, and document links.
        """
        _log_call(
            "search_executive_orders",
            president=president,
            year=year,
            term=term,
            signing_date_gte=signing_date_gte,
            signing_date_lte=signing_date_lte,
            per_page=per_page,
            page=page,
        )
        result = service.search_executive_orders(
            president=president,
            year=year,
            term=term,
            signing_date_gte=signing_date_gte,
            signing_date_lte=signing_date_lte,
            per_page=per_page,
            page=page,
        )
        return result.to_dict()

    @mcp.tool()
    def get_executive_order(eo_number: EoNumber) -> dict[str, Any] | str:
        """Get a specific executive order by its EO number (e.g., 14067).

        Returns detailed information including title, abstract, signing date,
        and links to full text.
        """
        _log_call("get_executive_order", eo_number=eo_number)
        record = service.get_executive_order_by_number(eo_number)
        if record is None:
            return _not_found(eo_number)
        return dict(record)

    @mcp.tool()
    def get_executive_order_full_text(eo_number: EoNumber) -> dict[str, Any] | str:
        """Fetch the complete full text of a specific executive order by its EO number.

        The full text provides detailed policy language, specific directives,
        legal citations, and implementation details that are not available in
        abstracts or titles.
        """
        _log_call("get_executive_order_full_text", eo_number=eo_number)
        result = service.get_executive_order_full_text(eo_number)
        if result is None:
            return _not_found(eo_number)
        return result.to_dict()

    @mcp.tool()
    def get_recent_executive_orders(
        days: Annotated[int, Field(description="Look-back window in days", ge=1)] = RECENT_DAYS,
    ) -> dict[str, Any]:
        """Get executive orders signed in the last 30 days (or the given number of days).

        Useful for monitoring recent executive actions.
        """
        _log_call("get_recent_executive_orders", days=days)
        return service.get_recent_executive_orders(days=days).to_dict()

    @mcp.tool()
    def get_executive_orders_by_president(
        president: Annotated[str, Field(description='President slug (e.g., "joe-biden")')],
        max_results: Annotated[
            int, Field(description="Maximum number of orders to return (API cap 2000)", ge=1, le=MAX_TOTAL_RESULTS)
        ] = MAX_TOTAL_RESULTS,
    ) -> dict[str, Any]:
        """Get every executive order signed by one president, across all result pages."""
        _log_call("get_executive_orders_by_president", president=president, max_results=max_results)
        results = service.get_executive_orders_by_president(president, max_results=max_results)
        return {
            "president": president,
            "count": len(results),
            "results": [dict(record) for record in results],
        }

    # ------------------------------------------------------------------
    # General documents
    # ------------------------------------------------------------------

    @mcp.tool()
    def get_document(
        document_number: Annotated[str, Field(description='The Federal Register document number (e.g., "2024-02154")')],
        fields: Fields = None,
    ) -> dict[str, Any]:
        """Fetch a Federal Register document by its document number.

        Works for any document type (rules, notices, presidential documents).
        Document numbers are formatted as YYYY-NNNNN.
        """
        _log_call("get_document", document_number=document_number, fields=fields)
        return dict(service.get_document(document_number, fields))

    @mcp.tool()
    def get_documents(
        document_numbers: Annotated[
            list[str], Field(description='Document numbers to fetch (e.g., ["2024-02154", "2024-02155"])', min_length=1)
        ],
        fields: Fields = None,
    ) -> dict[str, Any]:
        """Fetch several Federal Register documents in a single request."""
        _log_call("get_documents", document_numbers=document_numbers, fields=fields)
        return dict(service.get_documents(document_numbers, fields))

    @mcp.tool()
    def get_document_text(
        raw_text_url: Annotated[str, Field(description="The raw_text_url from a document response")],
    ) -> str:
        """Fetch the full plain text content of a Federal Register document.

        First use get_document to get the raw_text_url, then pass it here.
        """
        _log_call("get_document_text", raw_text_url=raw_text_url)
        return service.fetch_document_text(raw_text_url)

    @mcp.tool()
    def get_document_html(
        body_html_url: Annotated[str, Field(description="The body_html_url from a document response")],
    ) -> str:
        """Fetch the HTML body of a Federal Register document.

        First use get_document with the body_html_url field, then pass it here.
        """
        _log_call("get_document_html", body_html_url=body_html_url)
        return service.fetch_document_html(body_html_url)

    @mcp.tool()
    def search_documents(
        term: Term = None,
        type: Annotated[
            DocumentType | None,
            Field(
                description="Document type: RULE (final rule), PRORULE (proposed rule), NOTICE, "
                "PRESDOCU (presidential document)"
            ),
        ] = None,
        presidential_document_type: Annotated[
            PresidentialDocumentType | None, Field(description="For presidential documents, the specific type")
        ] = None,
        president: President = None,
        agency: Annotated[str | None, Field(description='Agency slug (e.g., "environmental-protection-agency")')] = None,
        publication_date_gte: Annotated[str | None, Field(description="Publication date >= (YYYY-MM-DD)")] = None,
        publication_date_lte: Annotated[str | None, Field(description="Publication date <= (YYYY-MM-DD)")] = None,
        publication_year: Annotated[int | None, Field(description="Exact publication year")] = None,
        order: Annotated[SortOrder | None, Field(description="Sort order")] = None,
        per_page: PerPage = None,
        page: Page = None,
    ) -> dict[str, Any]:
        """Search all Federal Register documents with flexible filtering.

        Use for rules, proposed rules, notices, or presidential documents.
        Supports full-text search, date ranges, and filtering by agency or
        president.
        """
        _log_call(
            "search_documents",
            term=term,
            type=type,
            presidential_document_type=presidential_document_type,
            president=president,
            agency=agency,
            publication_date_gte=publication_date_gte,
            publication_date_lte=publication_date_lte,
            publication_year=publication_year,
            order=order,
            per_page=per_page,
            page=page,
        )
        conditions = build_document_conditions(
            term=term,
            document_type=type,
            presidential_document_type=presidential_document_type,
            president=president,
            agency=agency,
            publication_date_gte=publication_date_gte,
            publication_date_lte=publication_date_lte,
            publication_year=publication_year,
        )
        query = DocumentQuery(conditions=conditions, per_page=per_page, page=page, order=order)
        return service.search_documents(query).to_dict()

    # ------------------------------------------------------------------
    # Other presidential documents
    # ------------------------------------------------------------------

    @mcp.tool()
    def search_presidential_memoranda(
        president: President = None,
        year: Year = None,
        term: Term = None,
        per_page: PerPage = None,
        page: Page = None,
    ) -> dict[str, Any]:
        """Search for presidential memoranda by president, year, or keyword.

        Memoranda are similar to executive orders but typically used for less
        formal directives.
        """
        _log_call("search_presidential_memoranda", president=president, year=year, term=term, per_page=per_page, page=page)
        result = service.search_presidential_memoranda(
            president=president, year=year, term=term, per_page=per_page, page=page
        )
        return result.to_dict()

    @mcp.tool()
    def search_proclamations(
        president: President = None,
        year: Year = None,
        term: Term = None,
        per_page: PerPage = None,
        page: Page = None,
    ) -> dict[str, Any]:
        """Search for presidential proclamations by president, year, or keyword.

        Proclamations are formal announcements often used for holidays,
        awareness months, or trade actions.
        """
        _log_call("search_proclamations", president=president, year=year, term=term, per_page=per_page, page=page)
        result = service.search_proclamations(president=president, year=year, term=term, per_page=per_page, page=page)
        return result.to_dict()

    # ------------------------------------------------------------------
    # Public inspection
    # ------------------------------------------------------------------

    @mcp.tool()
    def get_public_inspection_documents() -> dict[str, Any]:
        """Get documents currently on public inspection.

        These are available before official publication in the Federal
        Register. Useful for seeing what will be published tomorrow.
        """
        _log_call("get_public_inspection_documents")
        return dict(service.get_public_inspection_documents())

    @mcp.tool()
    def get_public_inspection_by_date(
        date: Annotated[str, Field(description="Public inspection date (YYYY-MM-DD)")],
    ) -> dict[str, Any]:
        """Get the documents that were on public inspection on a given date."""
        _log_call("get_public_inspection_by_date", date=date)
        return dict(service.get_public_inspection_by_date(date))

    @mcp.tool()
    def search_public_inspection(
        term: Term = None,
        agency: Annotated[str | None, Field(description='Agency slug (e.g., "environmental-protection-agency")')] = None,
        type: Annotated[DocumentType | None, Field(description="Document type")] = None,
        per_page: PerPage = None,
        page: Page = None,
    ) -> dict[str, Any]:
        """Search the documents currently on public inspection by keyword, agency, or type."""
        _log_call("search_public_inspection", term=term, agency=agency, type=type, per_page=per_page, page=page)
        conditions = build_document_conditions(term=term, agency=agency)
        if type:
            conditions["type"] = Multi((type,))
        query = DocumentQuery(conditions=conditions, per_page=per_page, page=page)
        return service.search_public_inspection(query).to_dict()

    # ------------------------------------------------------------------
    # Agencies
    # ------------------------------------------------------------------

    @mcp.tool()
    def get_agencies() -> list[dict[str, Any]]:
        """Get a list of all federal agencies in the Federal Register system.

        Returns name, slug, and description for each agency.
        """
        _log_call("get_agencies")
        return [dict(agency) for agency in service.get_agencies()]

    @mcp.tool()
    def get_agency(
        slug: Annotated[
            str,
            Field(description='Agency slug (e.g., "environmental-protection-agency", "securities-and-exchange-commission")'),
        ],
    ) -> dict[str, Any]:
        """Get detailed information about a specific federal agency.

        Includes description, URL, and recent document counts.
        """
        _log_call("get_agency", slug=slug)
        return dict(service.get_agency(slug))

    return mcp
