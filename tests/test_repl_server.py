import json
import socket
import threading

import pytest

from eta.repl_server import ReplServer


@pytest.fixture
def server():
    return ReplServer(host="127.0.0.1", port=0)


def test_eval_returns_printed_last_value(server):
    resp = server.handle_request({"cmd": "eval", "code": "(let sq (lambda (x) (* x x))) (sq 12)"})
    assert resp == {"ok": True, "result": "144"}


def test_definitions_persist_across_requests(server):
    server.handle_request({"cmd": "eval", "code": "(let k 7)"})
    assert server.handle_request({"cmd": "eval", "code": "(+ k 1)"})["result"] == "8"


def test_errors_are_reported(server):
    resp = server.handle_request({"cmd": "eval", "code": "(car ())"})
    assert resp["ok"] is False
    assert resp["kind"] == "TypeMismatch"


def test_quit_is_acknowledged(server):
    assert server.handle_request({"cmd": "eval", "code": "(quit)"}) == {"ok": True, "quit": True}


def test_empty_code(server):
    assert server.handle_request({"cmd": "eval", "code": ""}) == {"ok": True, "result": None}


@pytest.mark.parametrize(
    "line",
    [b"not json", b'{"cmd": "exec"}', b"[1, 2]", b'{"cmd": "eval", "code": 5}'],
)
def test_bad_requests(server, line):
    resp = server.handle_line(line)
    assert resp["ok"] is False


def test_client_connection_round_trip(server):
    a, b = socket.socketpair()
    worker = threading.Thread(target=server._handle_client, args=(b, ("test", 0)))
    worker.start()
    with a:
        a.sendall(b'{"cmd": "eval", "code": "(cons 1 2)"}\n{"cmd": "eval", "code": "(quit)"}\n')
        reader = a.makefile("rb")
        first = json.loads(reader.readline())
        second = json.loads(reader.readline())
        # The server closes the connection after quit
        assert reader.readline() == b""
        reader.close()
    worker.join(timeout=5)
    assert first == {"ok": True, "result": "(1 . 2)"}
    assert second == {"ok": True, "quit": True}


def test_shared_interpreter_serialises_threads(server):
    server.handle_request({"cmd": "eval", "code": "(let total 0)"})

    def bump():
        for _ in range(50):
            server.handle_request({"cmd": "eval", "code": "(let total (+ total 1))"})

    threads = [threading.Thread(target=bump) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert server.handle_request({"cmd": "eval", "code": "total"})["result"] == "200"


def test_nesting_too_deep_is_reported_to_client(server):
    depth = 20_000
    resp = server.handle_request({"cmd": "eval", "code": "'" + "(" * depth + ")" * depth})
    assert resp["ok"] is False
    assert resp["kind"] == "SyntaxError"

    server.handle_request({"cmd": "eval", "code": (
        "(let build (lambda (n acc) (cond ((< n 1) acc) (#t (build (- n 1) (cons acc ()))))))"
    )})
    resp = server.handle_request({"cmd": "eval", "code": f"(build {depth} 1)"})
    assert resp["ok"] is False
    assert resp["kind"] == "RecursionDepth"
    assert server.handle_request({"cmd": "eval", "code": "(build 1 1)"})["result"] == "(1)"
