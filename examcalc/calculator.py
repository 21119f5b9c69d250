#!/usr/bin/env python3
"""
Terminal front end for the calculator core.

Usage:
  examcalc "sin(30)" "ans*2"      # one-shot, ans carries between arguments
  examcalc --angle rad            # interactive loop

Interactive commands: :deg, :rad, :ac (reset ans), :q (quit).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from .engine import evaluate_expression
from .errors import CalculatorError
from .whitelist import AngleMode

# --- Env Config ---
DEFAULT_ANGLE_MODE = os.getenv("EXAMCALC_ANGLE_MODE", "DEG")
DEFAULT_LOG_LEVEL = os.getenv("EXAMCALC_LOG_LEVEL", "WARNING")

logger = logging.getLogger(__name__)


class Session:
    """Holds the angle mode and the previous answer between lines."""

    def __init__(self, angle_mode: AngleMode | str = AngleMode.DEGREES):
        self.angle_mode = AngleMode.coerce(angle_mode)
        self.last_answer = 0.0

    def handle(self, line: str) -> Optional[str]:
        """Process one input line and return the text to show, or None to quit."""
        command = line.strip().lower()
        if command in (":q", ":quit", ":exit"):
            return None
        if command == ":deg":
            self.angle_mode = AngleMode.DEGREES
            return "Angle: DEG"
        if command == ":rad":
            self.angle_mode = AngleMode.RADIANS
            return "Angle: RAD"
        if command == ":ac":
            self.last_answer = 0.0
            return "Cleared"

        try:
            result = evaluate_expression(line, self.angle_mode, self.last_answer)
        except CalculatorError as e:
            return f"Error: {e}"
        self.last_answer = result.value
        return f"= {result.formatted}"


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="examcalc", description="Exam-safe scientific calculator")
    ap.add_argument("expressions", nargs="*", help="expressions to evaluate in order; omit for interactive mode")
    ap.add_argument("--angle", default=DEFAULT_ANGLE_MODE, type=AngleMode.coerce, help="DEG or RAD (default: %(default)s)")
    ap.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="logging level (default: %(default)s)")
    return ap


def run_once(session: Session, expressions: Sequence[str]) -> int:
    status = 0
    for expr in expressions:
        output = session.handle(expr)
        if output is None:
            break
        print(output)
        if output.startswith("Error:"):
            status = 1
    return status


def run_interactive(session: Session) -> int:
    print(f"Angle: {session.angle_mode.value}  (:deg, :rad, :ac, :q)")
    while True:
        try:
            line = input("Enter expression (e.g. sin(30) + 12/3): ")
        except EOFError:
            print()
            return 0
        if not line.strip():
            continue
        output = session.handle(line)
        if output is None:
            return 0
        print(output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    session = Session(args.angle)
    logger.debug("Starting calculator in %s mode", session.angle_mode.value)
    if args.expressions:
        return run_once(session, args.expressions)
    return run_interactive(session)


if __name__ == "__main__":
    sys.exit(main())
