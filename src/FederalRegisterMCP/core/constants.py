"""Federal Register API constants."""

from __future__ import annotations

from typing import Final

BASE_URL: Final[str] = "https://www.federalregister.gov/api/v1"

# Document types accepted by conditions[type]
RULE: Final[str] = "RULE"
PROPOSED_RULE: Final[str] = "PRORULE"
NOTICE: Final[str] = "NOTICE"
PRESIDENTIAL_DOCUMENT: Final[str] = "PRESDOCU"

DOCUMENT_TYPES: Final[tuple[str, ...]] = (RULE, PROPOSED_RULE, NOTICE, PRESIDENTIAL_DOCUMENT)

# Presidential document subtypes accepted by conditions[presidential_document_type]
DETERMINATION: Final[str] = "determination"
EXECUTIVE_ORDER: Final[str] = "executive_order"
MEMORANDUM: Final[str] = "memorandum"
PRESIDENTIAL_NOTICE: Final[str] = "notice"
PROCLAMATION: Final[str] = "proclamation"

PRESIDENTIAL_DOCUMENT_TYPES: Final[tuple[str, ...]] = (
    DETERMINATION,
    EXECUTIVE_ORDER,
    MEMORANDUM,
    PRESIDENTIAL_NOTICE,
    PROCLAMATION,
)

DEFAULT_PER_PAGE: Final[int] = 100
# Remote limits: per_page ceiling and total matches reachable through paging.
MAX_PER_PAGE: Final[int] = 1000
MAX_TOTAL_RESULTS: Final[int] = 2000

RECENT_DAYS: Final[int] = 30
