"""
Simple TCP REPL server for Eta.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(fact 10)"}
- Response: {"ok": true, "result": <printed last value>} or {"ok": false, "error": <message>}
- (quit) answers {"ok": true, "quit": true} and closes that client's connection.

All clients share one Interpreter, so definitions persist across requests and
connections. The interpreter's lock serialises top-level evaluations.
"""

from __future__ import annotations

import json
import socket
import threading
from typing import Any, Tuple

from loguru import logger

from eta.config import get_server_address
from eta.errors import EtaError, QuitRequested
from eta.interpreter import Interpreter
from eta.printer import print_value


class ReplServer:
    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        interpreter: Interpreter | None = None,
    ):
        default_host, default_port = get_server_address()
        self.host = host or default_host
        self.port = port if port is not None else default_port
        # Keep a single interpreter to maintain session state
        self.interp = interpreter or Interpreter()

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("repl server listening on {}:{}", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def handle_request(self, req: Any) -> dict[str, Any]:
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        last = None
        try:
            for _, value in self.interp.eval_iter(code):
                last = value
        except QuitRequested:
            return {"ok": True, "quit": True}
        except EtaError as ex:
            return {"ok": False, "error": str(ex), "kind": ex.kind}
        return {"ok": True, "result": None if last is None else print_value(last)}

    def handle_line(self, line: bytes) -> dict[str, Any]:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        return self.handle_request(req)

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("client connected from {}:{}", *addr)
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
                    resp = self.handle_line(line)
                    if not resp["ok"]:
                        logger.warning("client {}:{} error: {}", *addr, resp["error"])
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
                    if resp.get("quit"):
                        logger.info("client {}:{} quit", *addr)
                        return
        logger.info("client {}:{} disconnected", *addr)
