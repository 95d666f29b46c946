"""Line-oriented interactive loop around a single long-lived Interpreter."""

from __future__ import annotations

import sys
from typing import IO

from ducklisp import config
from ducklisp.errors import LispError
from ducklisp.interpreter import Interpreter

BANNER = "ducklisp interpreter\nType 'exit' to quit"


class Repl:
    def __init__(
        self,
        interp: Interpreter | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
        prompt: str | None = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt = prompt if prompt is not None else config.get_prompt()
        # print output goes to the same stream as results
        self.interp = interp or Interpreter(output=self.stdout)

    def handle_line(self, line: str) -> bool:
        """Evaluate one line. Returns False when the session should end."""
        line = line.strip()
        if line.lower() == "exit":
            return False
        if not line:
            return True
        try:
            print(self.interp.eval_to_string(line), file=self.stdout)
        except LispError as ex:
            print(f"Error: {ex}", file=self.stderr)
        return True

    def run(self) -> None:
        print(BANNER, file=self.stdout)
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                # EOF
                self.stdout.write("\n")
                break
            if not self.handle_line(line):
                break
