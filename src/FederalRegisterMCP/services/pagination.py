"""Sequential page collection for Federal Register searches."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from FederalRegisterMCP.core.constants import DEFAULT_PER_PAGE, MAX_PER_PAGE, MAX_TOTAL_RESULTS
from FederalRegisterMCP.core.models import Record, SearchResult
from FederalRegisterMCP.core.query import DocumentQuery
from FederalRegisterMCP.utils.log import log

SearchFunction = Callable[[DocumentQuery], SearchResult]


def collect_all_results(
    search: SearchFunction,
    query: DocumentQuery,
    *,
    max_results: int = MAX_TOTAL_RESULTS,
) -> list[Record]:
    """Request successive pages and concatenate their results.

    Pages are fetched one at a time starting at page 1, with page size
    ``min(query.per_page or 100, 1000)``. Collection stops on the first empty
    page, when the current page reaches the reported ``total_pages``, or once
    ``max_results`` records have been gathered.

    Args:
        search: Search operation taking a query and returning one page.
        query: Filter and field selection; its ``page``/``per_page`` are replaced.
        max_results: Cap on the number of records returned.

    Returns:
        Records from all fetched pages, truncated to ``max_results``.
    """
    per_page = min(query.per_page or DEFAULT_PER_PAGE, MAX_PER_PAGE)
    collected: list[Record] = []
    page = 1

    while len(collected) < max_results:
        response = search(dataclasses.replace(query, page=page, per_page=per_page))
        if not response.results:
            log.debug("Empty page %d; stop", page)
            break

        collected.extend(response.results)
        log.debug(
            "Fetched page %d/%d: %d items (total %d)",
            page,
            response.total_pages,
            len(response.results),
            len(collected),
        )

        if page >= response.total_pages:
            break
        page += 1

    return collected[:max_results]
