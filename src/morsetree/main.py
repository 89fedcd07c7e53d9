from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Without arguments, runs the reference program: build the international
tree, encode "hello world", print it, decode it back and print that.
With arguments, routes to the CLI controller. Unhandled exceptions from
either path are trapped by the global supervisor, logged and turned into
exit status 1.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Allow direct execution of this file from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from morsetree.core.pipeline.engine import run_demo  # noqa: E402
from morsetree.domain.alphabet import build_international_tree  # noqa: E402
from morsetree.domain.constants import DEMO_TEXT  # noqa: E402
from morsetree.infra.logging import LoggingConfig, configure_logging  # noqa: E402


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def report_fatal_exception(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Persist an unhandled exception in the logs and print its trace on stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("morsetree.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (MORSETREE)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """Interpreter hook: report the exception and exit with status 1."""
    report_fatal_exception(exctype, value, tb)
    sys.exit(1)


# Hook into the Python interpreter exception flow
sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def run_reference_program() -> int:
    """
    Encode the demo text, decode it back and print both lines.

    A fatal decode error is not caught here; `main` reports it and returns 1.

    Returns:
        int: Process exit code.
    """
    configure_logging(LoggingConfig())

    tree = build_international_tree()
    encoded, decoded = run_demo(DEMO_TEXT, tree)

    print(f"encoded: {encoded}")
    print(f"decoded: {decoded}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Detect execution context and delegate to the matching runner.

    Args:
        argv: Command line arguments without the program name.
              Defaults to sys.argv[1:].

    Returns:
        int: Standard process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        if argv:
            from morsetree.interface.cli.app import main as cli_main
            return cli_main(argv)
        return run_reference_program()

    except Exception as e:
        report_fatal_exception(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
