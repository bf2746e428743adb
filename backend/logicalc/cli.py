"""
Logicalc terminal front-end.

Usage:
    logicalc 1 AND 0 =          Run actions and print the final display
    logicalc                    Interactive mode, one or more actions per line

Actions: 0 1 ( ) AND OR XOR NOT IMPLIES BICOND, clear (C), del, = .
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import load_config
from .session import LogicCalculator

QUIT_COMMANDS = ("quit", "exit")


class TerminalDisplay:
    """Display surface that keeps the last rendered text."""

    def __init__(self):
        self.text = ""

    def render(self, text: str) -> None:
        self.text = text


def run_actions(calculator: LogicCalculator, actions: List[str]) -> None:
    """Dispatch actions in order."""
    for action in actions:
        calculator.handle(action)


def repl(calculator: LogicCalculator, display: TerminalDisplay,
         stdin: TextIO, stdout: TextIO) -> None:
    """Read actions line by line until EOF or quit."""
    print(display.text, file=stdout)
    for line in stdin:
        words = line.split()
        if any(w.lower() in QUIT_COMMANDS for w in words):
            break
        run_actions(calculator, words)
        print(display.text, file=stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logicalc",
        description="Propositional logic calculator",
    )
    parser.add_argument("actions", nargs="*", help="Actions to run, e.g. 1 AND 0 =")
    parser.add_argument("--config", type=Path, default=None, help="Path to YAML config")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    display = TerminalDisplay()
    calculator = LogicCalculator(render=display.render, config=config)
    display.render(calculator.display)

    if args.actions:
        run_actions(calculator, args.actions)
        print(display.text)
    else:
        repl(calculator, display, sys.stdin, sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
