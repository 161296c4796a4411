"""Command-line entry point: interactive REPL, script runner or network REPL."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from eta.config import get_recursion_limit
from eta.errors import EtaError, QuitRequested
from eta.interpreter import Interpreter
from eta.logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eta", description="Eta Lisp interpreter")
    parser.add_argument("file", nargs="?", type=Path, help="source file to evaluate")
    parser.add_argument("--serve", action="store_true", help="run the JSON-over-TCP REPL server")
    parser.add_argument("--host", help="server host (default: ETA_SERVER_HOST)")
    parser.add_argument("--port", type=int, help="server port (default: ETA_SERVER_PORT)")
    parser.add_argument("--log-level", help="log level (default: ETA_LOG_LEVEL)")
    return parser


def run_file(path: Path, interpreter: Interpreter | None = None) -> int:
    interp = interpreter or Interpreter()
    try:
        interp.eval_prelude(path.read_text(encoding="utf-8"))
    except QuitRequested:
        return 0
    except EtaError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    limit = get_recursion_limit()
    if limit is not None:
        logger.debug("recursion limit set to {}", limit)
        sys.setrecursionlimit(limit)

    if args.serve:
        from eta.repl_server import ReplServer
        ReplServer(args.host, args.port).serve_forever()
        return 0
    if args.file is not None:
        return run_file(args.file)

    from eta.repl import Repl
    return Repl().run()
