"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) objects and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the session data model (SessionState).
2. Instantiates the SessionController that owns it.
3. Instantiates the Main Window (View) and passes the controller in.
4. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

import argparse
import logging
import sys

from pointtrigger.app import create_app
from pointtrigger.config import SURFACE_HEIGHT, SURFACE_WIDTH
from pointtrigger.controller.session import SessionController
from pointtrigger.logging_config import setup_logging
from pointtrigger.model.frame import SurfaceSize
from pointtrigger.model.state import SessionState
from pointtrigger.view.main_window import MainWindow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pointtrigger",
        description="Click points on a surface and export them as CSV."
    )
    parser.add_argument("--width", type=int, default=SURFACE_WIDTH, help="Surface width in pixels")
    parser.add_argument("--height", type=int, default=SURFACE_HEIGHT, help="Surface height in pixels")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args, qt_args = build_parser().parse_known_args(argv)
    if args.width <= 0 or args.height <= 0:
        build_parser().error("--width and --height must be positive")

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app([sys.argv[0], *qt_args])

    # 3. Initialize the Data Model and its controller
    state = SessionState(surface=SurfaceSize(args.width, args.height))
    controller = SessionController(state)

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
