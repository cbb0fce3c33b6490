#!/usr/bin/env python3
"""Command line driver for cgetopt."""

import logging
import os
import shlex
import sys
from typing import Optional

from .argument_processor import ArgumentProcessor
from .exceptions import CGetoptError, DuplicateOptionError, OptionError
from .parse_engine import parse
from .parse_result import ParseResult
from .types import ArgsList, ExitCode

DRIVER_SHORT_SPEC = "o:l:n:qh"
DRIVER_LONG_SPEC = ["options=", "longoptions=", "name=", "quiet", "help"]

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2


def debug_log(message: str) -> None:
    """Log debug message when CGETOPT_DEBUG=1 is set."""
    if os.environ.get("CGETOPT_DEBUG", "").lower() in ("1", "true", "yes", "on"):
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


def print_help() -> None:
    """Print concise help message about cgetopt functionality."""
    help_text = """cgetopt - parse command line options
Usage:
  cgetopt -o hi: -- -i file.txt a b                 # Short options
  cgetopt -o r -l force,input= -- --input x -r y    # Short and long options
  cgetopt -n myprog -o v -- "$@"                    # Name used in error messages
  eval set -- "$(cgetopt -o hi: -- "$@")"           # Normalize a script's argv

  -o, --options SHORTSPEC     letters, ':' after a letter means it takes a value
  -l, --longoptions WORDS     comma separated words, '=' at the end takes a value
  -n, --name NAME             program name used in error messages
  -q, --quiet                 do not report parse errors
  Set CGETOPT_DEBUG=1 for debug output
"""
    print(help_text)


def format_result(result: ParseResult) -> str:
    """Render a parse result as a shell-quoted line ending in positionals."""
    parts: ArgsList = []
    for key, value in result.options.items():
        parts.append(key)
        if value is not None:
            parts.append(shlex.quote(value))
    parts.append("--")
    parts.extend(shlex.quote(arg) for arg in result.positionals)
    return " " + " ".join(parts)


class Application:
    """Main application orchestrator."""

    def __init__(self, argument_processor: Optional[ArgumentProcessor] = None):
        self.argument_processor = argument_processor or ArgumentProcessor()

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        if not args:
            print_help()
            return EXIT_OK

        driver_args, tokens = self.argument_processor.split_at_separator(args)
        debug_log(f"run: driver_args={driver_args}, tokens={tokens}")

        try:
            driver = parse(driver_args, DRIVER_SHORT_SPEC, DRIVER_LONG_SPEC)
            name = self._pick(driver, "-n", "--name") or "cgetopt"
            short_spec = self._pick(driver, "-o", "--options") or ""
            long_spec = self.argument_processor.split_long_words(
                self._pick(driver, "-l", "--longoptions")
            )
        except CGetoptError as e:
            logging.error(f"cgetopt: {e}")
            return EXIT_USAGE_ERROR

        if "-h" in driver or "--help" in driver:
            print_help()
            return EXIT_OK

        quiet = "-q" in driver or "--quiet" in driver
        try:
            tokens = list(driver.positionals) + tokens
            debug_log(
                f"run: short_spec={short_spec!r}, long_spec={long_spec}, tokens={tokens}"
            )
            result = parse(tokens, short_spec, long_spec)
        except OptionError as e:
            if not quiet:
                logging.error(f"{name}: {e}")
            return EXIT_PARSE_ERROR
        except CGetoptError as e:
            logging.error(f"{name}: {e}")
            return EXIT_USAGE_ERROR

        debug_log(f"run: result={result!r}")
        print(format_result(result))
        return EXIT_OK

    @staticmethod
    def _pick(driver: ParseResult, short_key: str, long_key: str) -> Optional[str]:
        """Return the value given for a driver option under either spelling."""
        if short_key in driver and long_key in driver:
            raise DuplicateOptionError(long_key)
        return driver.get(short_key) or driver.get(long_key)


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except CGetoptError as e:
        logging.error(str(e))
        return EXIT_USAGE_ERROR
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return EXIT_USAGE_ERROR
