"""Registro de sessões MCP para o transporte streamable HTTP.

Cada sessão tem seu próprio transporte, dispatcher e Server MCP; todas
compartilham o mesmo InterClient (e o cache de token).

Ciclo de vida explícito:
- criação: POST sem header mcp-session-id contendo um request "initialize"
- remoção: quando o loop do Server termina (DELETE do cliente, fechamento
  do transporte ou shutdown do registry)
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import anyio
from mcp.server.streamable_http import MCP_SESSION_ID_HEADER, StreamableHTTPServerTransport
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.observability import reset_session_id, set_session_id
from app.transports.mcp_server import build_mcp_server

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from anyio.abc import TaskGroup
    from mcp.server.lowlevel import Server
    from starlette.types import Message, Receive, Scope, Send

    from app.tools import InterToolDispatcher

logger = logging.getLogger(__name__)

_COMPONENT = "mcp_session_registry"


@dataclass(slots=True)
class McpSession:
    """Sessão ativa: transporte + dispatcher dedicados."""

    session_id: str
    transport: StreamableHTTPServerTransport
    dispatcher: InterToolDispatcher


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        {"jsonrpc": "2.0", "id": None, "error": {"code": -32600, "message": message}},
        status_code=status_code,
    )


def is_initialize_request(body: bytes) -> bool:
    """True se o corpo JSON-RPC contém um request "initialize"."""
    try:
        payload = json.loads(body or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return False
    messages = payload if isinstance(payload, list) else [payload]
    return any(
        isinstance(message, dict) and message.get("method") == "initialize"
        for message in messages
    )


def _replay_receive(body: bytes, receive: Receive) -> Receive:
    """Devolve o corpo já lido ao transporte, depois delega ao receive original."""
    replayed = False

    async def _receive() -> Message:
        nonlocal replayed
        if not replayed:
            replayed = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return _receive


class McpSessionRegistry:
    """Mapa session-id → sessão, exposto como app ASGI em /mcp.

    Args:
        dispatcher_factory: Cria um dispatcher por sessão.
        json_response: Responde JSON em vez de SSE nos POSTs.
    """

    def __init__(
        self,
        dispatcher_factory: Callable[[], InterToolDispatcher],
        *,
        json_response: bool = False,
    ) -> None:
        self._dispatcher_factory = dispatcher_factory
        self._json_response = json_response
        self._sessions: dict[str, McpSession] = {}
        self._task_group: TaskGroup | None = None

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> McpSession | None:
        return self._sessions.get(session_id)

    @asynccontextmanager
    async def run(self) -> AsyncIterator[McpSessionRegistry]:
        """Mantém o task group das sessões; encerra todas na saída."""
        async with anyio.create_task_group() as task_group:
            self._task_group = task_group
            logger.info("mcp_registry_started", extra={"component": _COMPONENT})
            try:
                yield self
            finally:
                task_group.cancel_scope.cancel()
                self._task_group = None
        self._sessions.clear()
        logger.info("mcp_registry_stopped", extra={"component": _COMPONENT})

    async def create_session(self) -> McpSession:
        """Registra uma nova sessão e inicia seu loop de Server.

        Raises:
            RuntimeError: Se o registry não estiver rodando.
        """
        if self._task_group is None:
            raise RuntimeError("McpSessionRegistry.run() não foi iniciado")

        session_id = uuid4().hex
        transport = StreamableHTTPServerTransport(
            mcp_session_id=session_id,
            is_json_response_enabled=self._json_response,
        )
        dispatcher = self._dispatcher_factory()
        session = McpSession(session_id=session_id, transport=transport, dispatcher=dispatcher)
        self._sessions[session_id] = session
        await self._task_group.start(self._serve, session, build_mcp_server(dispatcher))
        logger.info(
            "mcp_session_created",
            extra={"component": _COMPONENT, "session_id": session_id, "active": len(self)},
        )
        return session

    def remove(self, session_id: str) -> bool:
        """Remove a sessão do mapa. Retorna False se já não existia."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(
            "mcp_session_closed",
            extra={"component": _COMPONENT, "session_id": session_id, "active": len(self)},
        )
        return True

    async def _serve(
        self,
        session: McpSession,
        server: Server,
        *,
        task_status: Any = anyio.TASK_STATUS_IGNORED,
    ) -> None:
        # Tasks filhas do Server herdam o session_id para os logs.
        token = set_session_id(session.session_id)
        try:
            async with session.transport.connect() as (read_stream, write_stream):
                task_status.started()
                await server.run(read_stream, write_stream, server.create_initialization_options())
        finally:
            self.remove(session.session_id)
            reset_session_id(token)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        session_id = request.headers.get(MCP_SESSION_ID_HEADER)

        if session_id:
            session = self._sessions.get(session_id)
            if session is None:
                response = _error_response(404, "Session not found")
                await response(scope, receive, send)
                return
            await session.transport.handle_request(scope, receive, send)
            return

        if request.method != "POST":
            response = _error_response(400, "Bad Request: No valid session ID provided")
            await response(scope, receive, send)
            return

        body = await request.body()
        if not is_initialize_request(body):
            response = _error_response(400, "Bad Request: Server not initialized")
            await response(scope, receive, send)
            return

        session = await self.create_session()
        await session.transport.handle_request(scope, _replay_receive(body, receive), send)
