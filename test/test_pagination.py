"""Tests for sequential result pagination."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FederalRegisterMCP.core.models import SearchResult
from FederalRegisterMCP.core.query import DocumentQuery, Scalar
from FederalRegisterMCP.services.pagination import collect_all_results


class _PagedSearch:
    """Fake search returning fixed-size pages and recording each query."""

    def __init__(self, *, pages: int, page_size: int, total_pages: int | None = None) -> None:
        self.pages = pages
        self.page_size = page_size
        self.total_pages = pages if total_pages is None else total_pages
        self.queries: list[DocumentQuery] = []

    def __call__(self, query: DocumentQuery) -> SearchResult:
        self.queries.append(query)
        page = query.page or 1
        if page > self.pages:
            return SearchResult(count=self.pages * self.page_size, total_pages=self.total_pages)
        results = [{"id": f"p{page}-{i}"} for i in range(self.page_size)]
        return SearchResult(count=self.pages * self.page_size, total_pages=self.total_pages, results=results)


class TestCollectAllResults(unittest.TestCase):
    def test_collects_every_page(self) -> None:
        search = _PagedSearch(pages=3, page_size=2)
        results = collect_all_results(search, DocumentQuery(), max_results=100)
        self.assertEqual(len(results), 6)
        self.assertEqual(len(search.queries), 3)
        self.assertEqual([q.page for q in search.queries], [1, 2, 3])
        self.assertEqual(results[0], {"id": "p1-0"})
        self.assertEqual(results[-1], {"id": "p3-1"})

    def test_truncates_to_max_results(self) -> None:
        search = _PagedSearch(pages=3, page_size=2)
        results = collect_all_results(search, DocumentQuery(), max_results=3)
        self.assertEqual(len(results), 3)
        self.assertEqual(len(search.queries), 2)

    def test_empty_first_page(self) -> None:
        search = _PagedSearch(pages=0, page_size=2, total_pages=5)
        results = collect_all_results(search, DocumentQuery(), max_results=100)
        self.assertEqual(results, [])
        self.assertEqual(len(search.queries), 1)

    def test_empty_page_stops_before_stale_total_pages(self) -> None:
        search = _PagedSearch(pages=2, page_size=2, total_pages=10)
        results = collect_all_results(search, DocumentQuery(), max_results=100)
        self.assertEqual(len(results), 4)
        self.assertEqual(len(search.queries), 3)

    def test_page_size_is_capped(self) -> None:
        search = _PagedSearch(pages=1, page_size=1)
        collect_all_results(search, DocumentQuery(per_page=5000))
        self.assertEqual(search.queries[0].per_page, 1000)

    def test_default_page_size(self) -> None:
        search = _PagedSearch(pages=1, page_size=1)
        collect_all_results(search, DocumentQuery())
        self.assertEqual(search.queries[0].per_page, 100)

    def test_filter_is_preserved_across_pages(self) -> None:
        search = _PagedSearch(pages=2, page_size=1)
        query = DocumentQuery(conditions={"president": Scalar("joe-biden")}, fields=["title"])
        collect_all_results(search, query)
        for sent in search.queries:
            self.assertEqual(sent.conditions["president"], Scalar("joe-biden"))
            self.assertEqual(sent.fields, ("title",))


if __name__ == "__main__":
    unittest.main()
