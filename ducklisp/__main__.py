"""Command-line entry point: interactive loop, one-shot eval, or TCP service."""

from __future__ import annotations

import argparse
import logging
import sys

from ducklisp import __version__, config
from ducklisp.errors import LispError
from ducklisp.interpreter import Interpreter
from ducklisp.repl import Repl
from ducklisp.repl_server import ReplServer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ducklisp", description="A small Lisp interpreter")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate one expression, print it and exit")
    parser.add_argument("--serve", action="store_true", help="run the JSON-lines TCP evaluation service")
    parser.add_argument("--host", default=None, help="service host (default: $DUCKLISP_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="service port (default: $DUCKLISP_PORT or 8765)")
    parser.add_argument("--session", action="store_true",
                        help="keep one interpreter for all service requests instead of one per request")
    parser.add_argument("--strict-arity", action="store_true", default=None,
                        help="reject function calls with the wrong number of arguments")
    parser.add_argument("--log-level", default=None, help="logging level (default: $DUCKLISP_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or config.get_log_level()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        server = ReplServer(args.host, args.port, session=args.session, strict_arity=args.strict_arity)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
        return 0

    if args.expr is not None:
        try:
            print(Interpreter(strict_arity=args.strict_arity).eval_to_string(args.expr))
        except LispError as ex:
            print(f"Error: {ex}", file=sys.stderr)
            return 1
        return 0

    Repl(Interpreter(strict_arity=args.strict_arity)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
