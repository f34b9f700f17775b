"""HTTP front end of the MCP server: JSON-RPC over POST on localhost."""

from __future__ import annotations

import logging
import queue
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from auriga.jsonrpc import PARSE_ERROR, JsonRpcParseError, Request, Response
from auriga.mcp_handler import handle_request

log = logging.getLogger(__name__)

_HOST = "127.0.0.1"


class _McpHttpServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address, events: queue.Queue) -> None:
        self.events = events
        super().__init__(address, _McpRequestHandler)


class _McpRequestHandler(BaseHTTPRequestHandler):
    server: _McpHttpServer

    def log_message(self, format: str, *args) -> None:
        log.debug("%s - %s", self.address_string(), format % args)

    def _send(self, status: int, body: bytes, content_type: str | None) -> None:
        try:
            self.send_response(status)
            if content_type is not None:
                self.send_header("Content-Type", content_type)
            if status != 204:
                self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if body and self.command != "HEAD":
                self.wfile.write(body)
        except OSError as exc:
            log.warning("failed to send HTTP response: %s", exc)

    def _method_not_allowed(self) -> None:
        self._send(405, b"Method not allowed", "text/plain")

    do_GET = do_HEAD = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = _method_not_allowed

    def do_POST(self) -> None:
        try:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length).decode("utf-8")
        except (ValueError, OSError):
            self._send(400, b"Bad request", "text/plain")
            return

        try:
            rpc_request = Request.from_json(body)
        except JsonRpcParseError:
            error = Response.failure(None, PARSE_ERROR, "Parse error")
            self._send(200, error.to_json().encode("utf-8"), "application/json")
            return

        rpc_response = handle_request(rpc_request, self.server.events)
        if rpc_response is None:
            self._send(204, b"", None)
        else:
            self._send(200, rpc_response.to_json().encode("utf-8"), "application/json")


class McpServer:
    """A running MCP server: its port and the queue of events it produces."""

    def __init__(self, httpd: _McpHttpServer, thread: threading.Thread) -> None:
        self._httpd = httpd
        self._thread = thread
        self.port: int = httpd.server_address[1]
        self.events: queue.Queue = httpd.events

    def close(self) -> None:
        """Stop serving and release the socket."""
        if self._thread.is_alive():
            self._httpd.shutdown()
            self._thread.join()
        self._httpd.server_close()

    def __enter__(self) -> McpServer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def start_mcp_server(port: int = 0) -> McpServer:
    """Serve MCP on localhost; port 0 lets the system pick a free port."""
    events: queue.Queue = queue.Queue()
    address = f"{_HOST}:{port}"
    try:
        httpd = _McpHttpServer((_HOST, port), events)
    except OSError as exc:
        raise OSError(f"MCP server failed to bind to {address}: {exc}") from exc
    thread = threading.Thread(
        target=httpd.serve_forever, name="mcp-server", daemon=True
    )
    thread.start()
    return McpServer(httpd, thread)