#!/usr/bin/env python3
import sys
import logging

import bf_config
from bf_interpreter import BrainfuckState, Interpreter
from bf_program import BrainfuckError, build_program

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_MALFORMED = 2

logger = logging.getLogger("bf_runner")


def setup_logging():
    level = getattr(logging, bf_config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def read_source(path):
    with open(path, 'rb') as f:
        return f.read()


def main(argv=None):
    if argv is None:
        argv = sys.argv
    setup_logging()

    if len(argv) < 2:
        prog = argv[0] if argv else "bf_runner.py"
        print(f"Usage: {prog} <bf-file>", file=sys.stderr)
        return EXIT_USAGE

    try:
        source = read_source(argv[1])
    except OSError as e:
        print(f"Error: cannot read {argv[1]}: {e.strerror or e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        program = build_program(source)
    except BrainfuckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MALFORMED

    logger.info("running %s (%d instructions)", argv[1], len(program))
    state = BrainfuckState()
    Interpreter(program).interpret(state)
    return EXIT_OK


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
