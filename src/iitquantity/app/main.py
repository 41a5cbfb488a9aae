"""
Run with: python -m iitquantity
"""
from __future__ import annotations

import argparse
import logging
import sys

from iitquantity.config import SECTION_KEY
from iitquantity.logging_config import setup_logging
from iitquantity.model.renderer import render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iitquantity",
        description="Explains the quantity of consciousness in Information Integration Theory.",
    )
    parser.add_argument("--dump", action="store_true",
                        help="Print an outline of the display tree and exit without opening a window.")
    parser.add_argument("--section", default=SECTION_KEY,
                        help=f"Section shown on start (default: {SECTION_KEY}).")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: WARNING).")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    if args.dump:
        # Consoles and redirects on Windows are often not UTF-8
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(errors="backslashreplace")
        print(render().outline())
        return 0

    # Qt is only needed for the window
    from iitquantity.app.application import create_app
    from iitquantity.app.ui.main_window import MainWindow
    from iitquantity.app.ui.panels.registry import list_keys

    if args.section not in list_keys():
        parser.error(f"unknown section '{args.section}' (choose from: {', '.join(list_keys())})")

    app = create_app()
    win = MainWindow(initial_section=args.section)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
