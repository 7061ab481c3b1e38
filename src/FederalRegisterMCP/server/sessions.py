"""HTTP session bookkeeping for the Streamable HTTP binding.

The MCP SDK owns the per-session transports; this module keeps a process-wide
registry of the session ids it has issued so the liveness endpoint can report
how many are active. Entries are created when the server answers an
initialize request with a new ``mcp-session-id`` and removed on termination.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, MutableMapping

from FederalRegisterMCP.utils.log import log

SESSION_HEADER = b"mcp-session-id"

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


@dataclass(slots=True)
class SessionInfo:
    """One active MCP session."""

    session_id: str
    opened_at: datetime
    last_seen: datetime
    requests: int = 1


class SessionRegistry:
    """Registry of active sessions keyed by session id."""

    def __init__(self) -> None:
        self._sessions: dict[str, SessionInfo] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    @property
    def active_count(self) -> int:
        """Number of sessions currently open."""
        return len(self._sessions)

    def get(self, session_id: str) -> SessionInfo | None:
        return self._sessions.get(session_id)

    def open(self, session_id: str) -> SessionInfo:
        """Register a newly issued session id."""
        now = datetime.now(timezone.utc)
        info = SessionInfo(session_id=session_id, opened_at=now, last_seen=now)
        self._sessions[session_id] = info
        log.info("Session initialized: %s (active %d)", session_id, len(self._sessions))
        return info

    def touch(self, session_id: str) -> SessionInfo | None:
        """Record activity on a known session; unknown ids are ignored."""
        info = self._sessions.get(session_id)
        if info is not None:
            info.last_seen = datetime.now(timezone.utc)
            info.requests += 1
        return info

    def close(self, session_id: str) -> SessionInfo | None:
        """Remove a session; returns the removed entry, if any."""
        info = self._sessions.pop(session_id, None)
        if info is not None:
            log.info("Session closed: %s (active %d)", session_id, len(self._sessions))
        return info

    def close_all(self) -> int:
        """Drop every session (process shutdown). Returns how many were open."""
        count = len(self._sessions)
        self._sessions.clear()
        return count


class SessionTrackingMiddleware:
    """ASGI middleware feeding ``SessionRegistry`` from MCP endpoint traffic.

    Only response headers and status are inspected, so streamed (SSE) bodies
    pass through untouched.
    """

    def __init__(self, app: ASGIApp, *, registry: SessionRegistry, path: str = "/mcp") -> None:
        self.app = app
        self.registry = registry
        self.path = path.rstrip("/")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope.get("path", "").rstrip("/") != self.path:
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "GET")
        request_session = _header(scope.get("headers") or [], SESSION_HEADER)

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                response_session = _header(message.get("headers") or [], SESSION_HEADER)
                self.observe(method, request_session, message["status"], response_session)
            await send(message)

        await self.app(scope, receive, send_wrapper)

    def observe(
        self,
        method: str,
        request_session: str | None,
        status: int,
        response_session: str | None,
    ) -> None:
        """Update the registry from one request/response exchange."""
        if request_session is None:
            if method == "POST" and status < 400 and response_session:
                self.registry.open(response_session)
            return

        if status == 404:
            # The SDK no longer knows this session (terminated or expired).
            self.registry.close(request_session)
        elif method == "DELETE" and status < 400:
            self.registry.close(request_session)
        elif status < 400:
            self.registry.touch(request_session)


def _header(headers: Any, name: bytes) -> str | None:
    for key, value in headers:
        if key.lower() == name:
            return value.decode("latin-1")
    return None
