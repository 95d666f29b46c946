from __future__ import annotations

"""
Simple TCP evaluation service for ducklisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(+ 1 2)"}
- Response: {"ok": true, "result": "3"} or {"ok": false, "error": "Error: <message>"}

By default every request is evaluated by a fresh Interpreter, so no
definitions leak between requests or clients. With session=True a single
Interpreter is kept alive and definitions persist across requests.
"""

import json
import logging
import socket
import threading
from typing import Any, Tuple

from ducklisp import config
from ducklisp.errors import LispError
from ducklisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        session: bool = False,
        strict_arity: bool | None = None,
    ):
        self.host = host or config.get_host()
        self.port = port if port is not None else config.get_port()
        self.strict_arity = strict_arity
        self.session = session
        self._lock = threading.Lock()
        self._interp = Interpreter(strict_arity=strict_arity) if session else None

    def _evaluate(self, code: str) -> str:
        if self._interp is None:
            return Interpreter(strict_arity=self.strict_arity).eval_to_string(code)
        # One shared environment: serialize access to it
        with self._lock:
            return self._interp.eval_to_string(code)

    def handle_request(self, line: bytes | str) -> dict[str, Any]:
        """Decode one request line and build the response object."""
        try:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            req = json.loads(line)
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}

        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}

        logger.debug("eval request: %r", code)
        try:
            return {"ok": True, "result": self._evaluate(code)}
        except LispError as ex:
            return {"ok": False, "error": f"Error: {ex}"}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d (session=%s)", self.host, self.port, self.session)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s:%d", *addr)
