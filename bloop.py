#!/usr/bin/env python3
"""
bloop - BLOOP Interpreter CLI

Usage:
    python bloop.py <file.bloop> [--max N] [--existential] [--speedrun] [--trace] [-v]
    python bloop.py -c "BLOOP code" [options]
    python bloop.py --rick | --blame

Exit codes:
    0  program finished (or an easter egg flag ran)
    1  usage error, unreadable file, bad --max value
    2  step limit reached (partial output is still printed)

Examples:
    python bloop.py examples/hello.bloop
    python bloop.py -c "BBOOO"
    python bloop.py --max 500000 examples/hello.bloop
    python bloop.py -c "B(B)O" --trace -vv
"""

import argparse
import logging
import os
import sys
import time
from pathlib import Path

# Fix stderr encoding on Windows (timer emoji in speedrun output)
if sys.stderr.encoding and sys.stderr.encoding.lower() not in ('utf-8', 'utf8'):
    try:
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')
    except AttributeError:
        pass

# Allow running from project root without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from bloop_vm import __version__
from bloop_vm.config import (
    DEFAULT_MAX_STEPS, EXIT_OK, EXIT_STEP_LIMIT, EXIT_USAGE, MAX_SNARKS,
    SOURCE_EXTENSION,
)
from bloop_vm.decoder import count_commands, tokens
from bloop_vm.flavor import BLAME, KONAMI_NOTICE, RICK_ROLL, Flavor
from bloop_vm.machine import BloopMachine, StepLimitExceeded

logger = logging.getLogger("bloop")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bloop",
        description="BLOOP Interpreter: one die, six commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="commands: B L O P ( )   everything else is ignored",
    )
    parser.add_argument("input", nargs="?", help="BLOOP source file (.bloop)")
    parser.add_argument("-c", "--code", help="Run inline BLOOP code instead of a file")
    parser.add_argument("--max", dest="max_steps", default=None,
                        help=f"Step limit (default {DEFAULT_MAX_STEPS})")

    # Easter egg flags
    parser.add_argument("--existential", action="store_true",
                        help="Enable existential commentary")
    parser.add_argument("--rick", action="store_true",
                        help="You know what this does")
    parser.add_argument("--blame", action="store_true",
                        help="It's not a bug")
    parser.add_argument("--speedrun", action="store_true",
                        help="Race the die")

    # Debug
    parser.add_argument("--tokens", action="store_true",
                        help="Dump recognized commands and exit (debug)")
    parser.add_argument("--trace", action="store_true",
                        help="Print one line per executed command to stderr")

    # Logging
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase verbosity (-v, -vv)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Suppress log messages except errors")
    parser.add_argument("--log-file", help="Write log to file")

    parser.add_argument("--version", action="version",
                        version=f"bloop {__version__}")
    return parser


def setup_logging(verbose: int = 0, quiet: bool = False, log_file: str = None):
    """Configure logging from the CLI flags.

    Console logging goes to stderr; stdout carries program output only.
    """
    if quiet:
        level = logging.ERROR
    elif verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:  # -vv or more
        level = logging.DEBUG

    handlers = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    handlers.append(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        handlers.append(file_handler)
        level = logging.DEBUG

    logging.basicConfig(level=level, handlers=handlers, force=True)


def parse_max_steps(value: str) -> int:
    """Parse --max. Raises ValueError unless value is a positive integer."""
    n = int(value)
    if n <= 0:
        raise ValueError(value)
    return n


def read_source(path: str) -> str:
    """Read a program file, warning when it lacks the .bloop extension."""
    if Path(path).suffix.lower() != SOURCE_EXTENSION:
        print(f"warning: file {path!r} does not have a {SOURCE_EXTENSION} extension",
              file=sys.stderr)
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.quiet, args.log_file)

    # Easter egg flags that never run code
    if args.rick:
        print(RICK_ROLL)
        return EXIT_OK
    if args.blame:
        print(BLAME)
        return EXIT_OK

    max_steps = DEFAULT_MAX_STEPS
    if args.max_steps is not None:
        try:
            max_steps = parse_max_steps(args.max_steps)
        except ValueError:
            print(f"error: --max value must be a positive integer, got {args.max_steps!r}",
                  file=sys.stderr)
            return EXIT_USAGE

    # Load program text
    code = ""
    if args.code is not None:
        code = args.code
    elif args.input:
        try:
            code = read_source(args.input)
        except OSError as e:
            print(f"error reading file: {e}", file=sys.stderr)
            return EXIT_USAGE
        logger.info("loaded %s (%d chars)", args.input, len(code))

    if code == "":
        print("error: no BLOOP code provided", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    flavor = Flavor()

    # A file with no commands at all gets a koan instead of a run
    if count_commands(code) == 0 and "!" not in code:
        print(flavor.koan())
        return EXIT_OK

    if args.tokens:
        for pos, char, mnem in tokens(code):
            print(f"{pos:6d}  {char}  {mnem}")
        return EXIT_OK

    max_steps, konami = flavor.konami(code, max_steps)
    if konami:
        print(KONAMI_NOTICE, file=sys.stderr)

    # Per occurrence in the source, not per execution
    for _ in range(min(code.count("!"), MAX_SNARKS)):
        print(flavor.snark(), file=sys.stderr)

    vm = BloopMachine()
    vm.load(code)
    vm.enable_trace(args.trace)

    start = time.perf_counter()
    result = vm.run(max_steps=max_steps)
    elapsed = time.perf_counter() - start

    if args.existential:
        sys.stdout.write(flavor.existential(result.output))
    else:
        sys.stdout.write(result.output)
    sys.stdout.flush()

    if args.trace:
        print(vm.get_trace(), file=sys.stderr)

    if args.speedrun:
        print(f"\n⏱  {elapsed * 1000:.3f}ms - {flavor.speedrun_comment(elapsed)}",
              file=sys.stderr)

    if flavor.is_nice(result.output):
        print("\nnice.", file=sys.stderr)

    try:
        result.check()
    except StepLimitExceeded as e:
        print(file=sys.stderr)
        print(flavor.lament(), file=sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_STEP_LIMIT

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
