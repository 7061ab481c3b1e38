"""Tests for MCP tool registration and tool payloads, through an in-memory client."""

import json
import sys
import unittest
from pathlib import Path
from typing import Any

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from fastmcp import Client
from fastmcp.exceptions import ToolError

from FederalRegisterMCP.core.query import Multi, Nested, Scalar
from FederalRegisterMCP.server.tools import build_document_conditions, create_server
from FederalRegisterMCP.services.documents import FederalRegisterService
from FederalRegisterMCP.sources.federal_register.client import FederalRegisterApiError

EXPECTED_TOOLS = {
    "search_executive_orders",
    "get_executive_order",
    "get_executive_order_full_text",
    "get_recent_executive_orders",
    "get_executive_orders_by_president",
    "get_document",
    "get_documents",
    "get_document_text",
    "get_document_html",
    "search_documents",
    "search_presidential_memoranda",
    "search_proclamations",
    "get_public_inspection_documents",
    "get_public_inspection_by_date",
    "search_public_inspection",
    "get_agencies",
    "get_agency",
}


class _StubClient:
    def __init__(self, responses: dict[str, Any], texts: dict[str, str] | None = None) -> None:
        self.responses = responses
        self.texts = texts or {}
        self.calls: list[tuple[str, Any]] = []

    def get_json(self, endpoint: str, query=None) -> Any:
        self.calls.append((endpoint, query))
        if endpoint not in self.responses:
            raise FederalRegisterApiError(
                "Federal Register API error: 404 Not Found", status_code=404, url=endpoint
            )
        return self.responses[endpoint]

    def fetch_text(self, url: str) -> str:
        return self.texts[url]

    def fetch_html(self, url: str) -> str:
        return self.texts[url]

    def close(self) -> None:
        pass


_EO_SEARCH = {
    "count": 3,
    "total_pages": 1,
    "results": [
        {"executive_order_number": 10, "document_number": "2024-00010", "title": "Ten"},
        {"executive_order_number": 22, "document_number": "2024-00022", "title": "Twenty-two"},
        {"executive_order_number": 31, "document_number": "2024-00031", "title": "Thirty-one"},
    ],
}


class TestToolRegistration(unittest.IsolatedAsyncioTestCase):
    async def test_every_tool_is_listed(self) -> None:
        server = create_server(FederalRegisterService(client=_StubClient({})))
        async with Client(server) as client:
            tools = await client.list_tools()
        self.assertEqual({tool.name for tool in tools}, EXPECTED_TOOLS)
        for tool in tools:
            self.assertTrue(tool.description, tool.name)


class TestToolPayloads(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.stub = _StubClient(
            {
                "/documents.json": _EO_SEARCH,
                "/documents/2024-00022.json": {
                    "document_number": "2024-00022",
                    "title": "Twenty-two",
                    "raw_text_url": "https://example.test/raw/22.txt",
                },
                "/agencies.json": [{"slug": "epa", "name": "Environmental Protection Agency"}],
                "/agencies/epa.json": {"slug": "epa", "name": "Environmental Protection Agency"},
            },
            texts={"https://example.test/raw/22.txt": "Section 1. Purpose."},
        )
        self.server = create_server(FederalRegisterService(client=self.stub))

    async def test_search_executive_orders_returns_json(self) -> None:
        async with Client(self.server) as client:
            result = await client.call_tool("search_executive_orders", {"president": "joe-biden"})
        payload = json.loads(result.content[0].text)
        self.assertEqual(payload["count"], 3)
        self.assertEqual(len(payload["results"]), 3)

    async def test_get_executive_order_found(self) -> None:
        async with Client(self.server) as client:
            result = await client.call_tool("get_executive_order", {"eo_number": 22})
        self.assertEqual(result.structured_content["result"]["title"], "Twenty-two")

    async def test_get_executive_order_not_found_is_text(self) -> None:
        async with Client(self.server) as client:
            result = await client.call_tool("get_executive_order", {"eo_number": 99})
        self.assertFalse(result.is_error)
        self.assertEqual(result.content[0].text, "Executive order 99 not found.")

    async def test_full_text_tool(self) -> None:
        async with Client(self.server) as client:
            result = await client.call_tool("get_executive_order_full_text", {"eo_number": 22})
        payload = result.structured_content["result"]
        self.assertEqual(payload["executive_order_number"], 22)
        self.assertEqual(payload["full_text"], "Section 1. Purpose.")
        self.assertNotIn("error", payload)

    async def test_document_text_is_plain_text(self) -> None:
        async with Client(self.server) as client:
            result = await client.call_tool("get_document_text", {"raw_text_url": "https://example.test/raw/22.txt"})
        self.assertEqual(result.content[0].text, "Section 1. Purpose.")

    async def test_agencies_tools(self) -> None:
        async with Client(self.server) as client:
            listing = await client.call_tool("get_agencies", {})
            agency = await client.call_tool("get_agency", {"slug": "epa"})
        self.assertEqual(listing.structured_content["result"][0]["slug"], "epa")
        self.assertEqual(agency.structured_content["name"], "Environmental Protection Agency")

    async def test_by_president_reports_count(self) -> None:
        async with Client(self.server) as client:
            result = await client.call_tool("get_executive_orders_by_president", {"president": "joe-biden"})
        payload = result.structured_content
        self.assertEqual(payload["president"], "joe-biden")
        self.assertEqual(payload["count"], 3)

    async def test_search_documents_builds_conditions(self) -> None:
        async with Client(self.server) as client:
            await client.call_tool(
                "search_documents",
                {"term": "water", "type": "RULE", "agency": "epa", "publication_year": 2024, "per_page": 20},
            )
        endpoint, query = self.stub.calls[-1]
        self.assertEqual(endpoint, "/documents.json")
        self.assertEqual(query.conditions["agencies"], Multi(("epa",)))
        self.assertEqual(query.conditions["type"], Scalar("RULE"))
        self.assertEqual(query.per_page, 20)

    async def test_upstream_failure_is_tool_error(self) -> None:
        async with Client(self.server) as client:
            with self.assertRaisesRegex(ToolError, "404"):
                await client.call_tool("get_document", {"document_number": "1999-00000"})


class TestBuildDocumentConditions(unittest.TestCase):
    def test_year_takes_precedence_over_range(self) -> None:
        conditions = build_document_conditions(
            publication_year=2023,
            publication_date_gte="2020-01-01",
            publication_date_lte="2020-12-31",
        )
        self.assertEqual(conditions["publication_date"], Nested({"year": 2023}))

    def test_range_when_no_year(self) -> None:
        conditions = build_document_conditions(publication_date_gte="2020-01-01")
        self.assertEqual(conditions["publication_date"], Nested({"gte": "2020-01-01"}))

    def test_empty_arguments_give_no_conditions(self) -> None:
        self.assertEqual(build_document_conditions(), {})


if __name__ == "__main__":
    unittest.main()
