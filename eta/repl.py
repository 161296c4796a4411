"""Interactive read-eval-print loop.

Lines are read through prompt_toolkit with a persistent file history. Each
line is parsed as a whole and every top-level expression is evaluated and
printed in turn. Errors are reported and the session carries on; (quit) or
end of input ends it.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Protocol, TextIO

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from eta.config import get_history_file, get_prompt
from eta.errors import EtaError, QuitRequested
from eta.interpreter import Interpreter
from eta.printer import print_value


class LineSource(Protocol):
    def prompt(self, message: str) -> str: ...


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        *,
        prompt: str | None = None,
        history_file: Path | None = None,
        output: TextIO | None = None,
        session: LineSource | None = None,
    ):
        self.interp = interpreter or Interpreter()
        self.prompt = prompt if prompt is not None else get_prompt()
        self.history_file = history_file or get_history_file()
        self.output = output or sys.stdout
        self._session = session

    def _write(self, text: str = "") -> None:
        print(text, file=self.output)

    def _build_session(self) -> LineSource:
        self.history_file.parent.mkdir(parents=True, exist_ok=True)
        return PromptSession(history=FileHistory(str(self.history_file)))

    def handle_line(self, line: str) -> bool:
        """Evaluate every expression on line; False once (quit) was evaluated."""
        try:
            for _, value in self.interp.eval_iter(line):
                self._write(f"> {print_value(value)}")
                self._write()
        except QuitRequested:
            return False
        except EtaError as err:
            logger.debug("{} in {!r}: {}", err.kind, line, err)
            self._write(f"error: {err}")
        return True

    def run(self) -> int:
        if self._session is None:
            self._session = self._build_session()
        logger.info("repl started, history at {}", self.history_file)
        self._write()
        while True:
            try:
                line = self._session.prompt(self.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            if not line.strip():
                continue
            try:
                if not self.handle_line(line):
                    break
            except KeyboardInterrupt:
                self._write("interrupted")
        self._write()
        return 0
