"""Default field selections per composed operation.

Each operation accepts a ``fields`` argument; these tuples apply only when the
caller passes none.
"""

from __future__ import annotations

from typing import Final

EXECUTIVE_ORDER_SEARCH_FIELDS: Final[tuple[str, ...]] = (
    "document_number",
    "executive_order_number",
    "title",
    "signing_date",
    "publication_date",
    "president",
    "html_url",
    "pdf_url",
    "json_url",
)

EXECUTIVE_ORDER_DETAIL_FIELDS: Final[tuple[str, ...]] = (
    "document_number",
    "executive_order_number",
    "executive_order_notes",
    "title",
    "abstract",
    "signing_date",
    "publication_date",
    "president",
    "html_url",
    "pdf_url",
    "full_text_xml_url",
    "body_html_url",
    "citation",
    "start_page",
    "end_page",
)

EXECUTIVE_ORDER_TEXT_FIELDS: Final[tuple[str, ...]] = (
    "document_number",
    "executive_order_number",
    "title",
    "signing_date",
    "president",
    "abstract",
    "raw_text_url",
    "html_url",
    "pdf_url",
)

PRESIDENTIAL_DOCUMENT_FIELDS: Final[tuple[str, ...]] = (
    "document_number",
    "title",
    "signing_date",
    "publication_date",
    "president",
    "html_url",
    "pdf_url",
)
