"""Example server for encoded-bytes.

This server exposes a few HTTP endpoints that carry EncodedBytes in URL path
pieces, headers and JSON bodies. Malformed base64url from clients is answered
with 400, never 500.
"""

import json
import sys
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any, Dict, Mapping, Optional

from encoded_bytes import (
    DecodingError,
    EncodedBytes,
    HttpApiCodec,
    JsonCodec,
    ParseFailure,
    dumps,
)

VALUE_HEADER = "X-Encoded-Value"


@dataclass
class ServerConfig:
    """Example server configuration.

    Attributes:
        host: Interface to bind.
        port: Port to bind.
    """

    host: str = "localhost"
    port: int = 8080


class Server:
    """Request logic, independent of the HTTP transport."""

    def __init__(self) -> None:
        self.http = HttpApiCodec()
        self.json = JsonCodec()
        self.blobs: Dict[EncodedBytes, EncodedBytes] = {}

    def _error(self, status: int, message: str) -> tuple[int, str]:
        return (status, json.dumps({"error": message}))

    def echo(self, piece: str, headers: Mapping[str, str]) -> tuple[int, str]:
        """Describe the value named by a path piece.

        The optional value header must decode too and is appended to the
        path value.
        """
        result = self.http.parse_url_piece(piece)
        if isinstance(result, ParseFailure):
            return self._error(400, result.message)
        value = result.value

        header = headers.get(VALUE_HEADER)
        if header is not None:
            suffix = self.http.parse_header(header.encode("latin-1"))
            if isinstance(suffix, ParseFailure):
                return self._error(400, suffix.message)
            value = value + suffix.value

        return (200, dumps({"value": value, "length": len(value), "hex": value.raw.hex()}))

    def concat(self, body: bytes) -> tuple[int, str]:
        """Concatenate the values of a JSON array body."""
        try:
            values = json.loads(body.decode("utf-8"))
            if not isinstance(values, list):
                raise DecodingError("expected Array")
            joined = EncodedBytes.concat(self.json.from_json(item) for item in values)
        except (UnicodeDecodeError, json.JSONDecodeError, DecodingError) as e:
            return self._error(400, str(e))
        return (200, dumps({"value": joined}))

    def store(self, piece: str, body: bytes) -> tuple[int, str]:
        """Store a raw body under the key named by a path piece."""
        result = self.http.parse_url_piece(piece)
        if isinstance(result, ParseFailure):
            return self._error(400, result.message)
        self.blobs[result.value] = EncodedBytes(body)
        return (200, dumps({"stored": result.value}))

    def index(self) -> tuple[int, str]:
        """List stored blobs, keyed by their encoded key."""
        return (200, dumps(self.blobs, sort_keys=True))

    def route(
        self, method: str, path: str, headers: Mapping[str, str], body: bytes
    ) -> Optional[tuple[int, str]]:
        """Dispatch a request; None when no route matches."""
        parts = path.split("?", 1)[0].strip("/").split("/")
        if method == "GET" and len(parts) == 2 and parts[0] == "echo":
            return self.echo(parts[1], headers)
        if method == "POST" and parts == ["concat"]:
            return self.concat(body)
        if method == "PUT" and len(parts) == 2 and parts[0] == "blobs":
            return self.store(parts[1], body)
        if method == "GET" and parts == ["blobs"]:
            return self.index()
        return None


class RequestHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the example server."""

    server_instance: Server

    def _handle(self) -> None:
        content_length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(content_length)

        try:
            reply = self.server_instance.route(self.command, self.path, self.headers, body)
        except Exception as e:
            print(f"Request handling error: {e}", file=sys.stderr)
            self.send_response(500)
            self.end_headers()
            return

        if reply is None:
            self.send_response(404)
            self.end_headers()
            return

        status_code, response = reply
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(response.encode("utf-8"))

    def do_GET(self) -> None:
        """Handle GET requests."""
        self._handle()

    def do_POST(self) -> None:
        """Handle POST requests."""
        self._handle()

    def do_PUT(self) -> None:
        """Handle PUT requests."""
        self._handle()

    def log_message(self, format: str, *args: Any) -> None:
        """Log HTTP requests to stderr."""
        sys.stderr.write(f"{self.address_string()} - {format % args}\n")


def main(config: Optional[ServerConfig] = None) -> None:
    """Start the server."""
    config = config or ServerConfig()
    RequestHandler.server_instance = Server()

    httpd = HTTPServer((config.host, config.port), RequestHandler)
    print(f"Server running on http://{config.host}:{config.port}")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down server...")
        httpd.shutdown()


if __name__ == "__main__":
    main()
