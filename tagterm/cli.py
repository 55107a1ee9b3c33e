#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Command line entry point and the main event loop."""

import argparse
import queue
import signal
import sys
import threading
from pathlib import Path

from . import VERSION
from .config import ConfigWatcher, default_config_path, load_config
from .core.app import App
from .core.errors import ConfigError, DirectoryError
from .core.logs import LogBuffer
from .ui.input import ConfigReload, ForceQuit, InputReader, KeyInput, Ticker
from .ui.tui import TUIRenderer
from .utils.debug import debug_requested_by_env


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagterm",
        description="TagTerm - Terminal ID3 tag editor for batches of MP3 files",
        epilog=f"TagTerm v{VERSION}",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to start browsing in (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to config file (default: {default_config_path()})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with detailed state information in the log panel",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write every log record to this file",
    )
    parser.add_argument("--version", action="version", version=f"TagTerm {VERSION}")
    return parser


def validate_start_dir(path) -> Path:
    """Resolve the starting directory, raising ``DirectoryError`` when unusable."""
    start = Path(path) if path else Path.cwd()
    if not start.is_dir():
        raise DirectoryError(start, "not a directory")
    return start.resolve()


def run_event_loop(app: App, renderer: TUIRenderer, events: "queue.Queue") -> None:
    """Drain ``events`` one at a time until the app stops."""
    while app.running:
        event = events.get()
        if isinstance(event, KeyInput):
            app.handle_key(event.key)
        elif isinstance(event, ConfigReload):
            app.reload_config(event.path)
        elif isinstance(event, ForceQuit):
            app.logs.info("Quit requested (Ctrl+C)")
            app.force_quit()
        renderer.update_display()


def main(argv=None) -> int:
    """Main entry point for TagTerm."""
    args = build_parser().parse_args(argv)

    logs = LogBuffer(debug=args.debug or debug_requested_by_env())

    if args.log_file:
        error = logs.start_file_logging(args.log_file)
        if error:
            print(f"Warning: could not initialize file logging ({error})")

    try:
        start_dir = validate_start_dir(args.path)
        config = load_config(Path(args.config) if args.config else None, logs)
        app = App(config, logs, start_dir)
    except (ConfigError, DirectoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        print("\nTagTerm startup cancelled.", file=sys.stderr)
        logs.stop_file_logging()
        return 1

    events: "queue.Queue" = queue.Queue()
    stop_event = threading.Event()

    watcher = ConfigWatcher(config.path, lambda path: events.put(ConfigReload(path)))
    if not watcher.start():
        logs.debugger.debug_log("CONFIG_WATCH", f"Not watching {config.path}: directory missing")

    reader = InputReader(events, stop_event, logs)
    if not reader.setup_terminal():
        logs.warn("Input handler disabled; stdin is not a terminal")
    ticker = Ticker(events, stop_event)
    renderer = TUIRenderer(app, logs)

    def request_quit(signum=None, frame=None):
        events.put(ForceQuit())

    previous_sigterm = signal.signal(signal.SIGTERM, request_quit)

    try:
        renderer.start_live_display()
        reader.start()
        ticker.start()
        run_event_loop(app, renderer, events)
    except KeyboardInterrupt:
        logs.info("Interrupted")
    finally:
        stop_event.set()
        for thread in (reader, ticker):
            if thread.is_alive():
                thread.join(timeout=1.0)
        watcher.stop()
        renderer.stop_live_display()
        reader.restore_terminal()
        signal.signal(signal.SIGTERM, previous_sigterm)
        logs.stop_file_logging()

    return 0


if __name__ == "__main__":
    sys.exit(main())
