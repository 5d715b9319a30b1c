# ============================================================================
# HookMonitor - Command Line Interface
#
# Purpose: CLI entry point for demo monitoring runs and report rendering
# Inputs: Command-line arguments
# Outputs: Report tables, rendered templates, exported JSON
# Dependencies: argparse, config, monitor, reporting, sinks
# Usage: python -m HookMonitor.cli demo --export
#        python -m HookMonitor.cli show runs/hooks_1a2b3c4d.json --template report.html
#
# Changelog:
#   2026-10-08: Initial CLI with 'demo' and 'show' commands
#   2026-10-18: demo --export writes to sink.output_dir; sink built from config
# ============================================================================

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from HookMonitor import __version__
from HookMonitor.config import Config
from HookMonitor.errors import ConfigurationError, HookMonitorError
from HookMonitor.logging_utils import get_logger, setup_logging
from HookMonitor.monitor import MonitorSession
from HookMonitor.registry.memory import InMemoryHookRegistry
from HookMonitor.reporting.render import ReportRenderer, render_table
from HookMonitor.reporting.report_builder import ReportBuilder
from HookMonitor.sinks.base import Sink
from HookMonitor.sinks.local_file import LocalFileSink
from HookMonitor.trigger import start_if_requested
from HookMonitor.utils.serialization import deserialize_report_from_json

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="hookmonitor",
        description="Record and report hook/event callback latency",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    demo_parser = subparsers.add_parser(
        "demo",
        help="Monitor a simulated request against the in-memory registry",
    )
    demo_parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Multiplier for the simulated callback sleep times (default: 1.0)",
    )
    demo_parser.add_argument(
        "--export",
        action="store_true",
        help="Export the report JSON to sink.output_dir from the config (default: runs/)",
    )
    demo_parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="Export the report JSON to this directory (implies --export)",
    )
    demo_parser.add_argument(
        "--jsonl",
        action="store_true",
        help="When exporting, also write one JSON object per entry (hooks_<session>.jsonl)",
    )
    demo_parser.add_argument(
        "--json-pretty",
        action="store_true",
        help="When exporting, write indented JSON",
    )
    demo_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Show at most this many rows (slowest first)",
    )
    _add_common_arguments(demo_parser)

    show_parser = subparsers.add_parser(
        "show",
        help="Render an exported report JSON through a template",
    )
    show_parser.add_argument("report", type=str, help="Path to a hooks_<session>.json file")
    show_parser.add_argument(
        "--template",
        type=str,
        default=None,
        help="Template file name, e.g. report.txt or report.html (default: from config)",
    )
    show_parser.add_argument(
        "--template-dir",
        type=str,
        default=None,
        help="Directory to load templates from (default: templates shipped with the package)",
    )
    show_parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write the rendered report to this file instead of stdout",
    )
    _add_common_arguments(show_parser)

    return parser


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to custom config YAML file",
    )
    subparser.add_argument(
        "--slow-threshold",
        type=float,
        default=None,
        help="Seconds above which a hook invocation is flagged slow (default: 0.1)",
    )
    subparser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from config, INFO)",
    )


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.from_yaml(args.config) if args.config else Config.from_default()
    if args.slow_threshold is not None:
        config.report.slow_threshold_seconds = args.slow_threshold
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging.level, config.logging.format)
    return config


def _create_sink(config: Config) -> Sink:
    if config.sink.type == "local_file":
        return LocalFileSink(
            config.sink.output_dir,
            indent=config.sink.json_indent,
            write_jsonl=config.sink.write_jsonl,
        )
    raise ConfigurationError(f"Unsupported sink type: {config.sink.type}")


class DemoSite:
    """Tiny host application that dispatches hooks like a page request would."""

    def __init__(self, registry: InMemoryHookRegistry, scale: float = 1.0):
        self.registry = registry
        self.scale = scale

    def _sleep(self, seconds: float) -> None:
        time.sleep(seconds * self.scale)

    def install_plugins(self) -> None:
        registry = self.registry
        registry.add_action("init", lambda: self._sleep(0.02))
        registry.add_action("init", lambda: self._sleep(0.005), priority=20)
        registry.add_action("wp_loaded", lambda: self._sleep(0.001))
        registry.add_filter("the_title", lambda title: title.title())
        registry.add_filter("the_content", self._slow_content_filter)
        registry.add_action("save_post", lambda post_id: self._sleep(0.12))
        registry.add_action("shutdown", lambda: None)

    def _slow_content_filter(self, content: str) -> str:
        self._sleep(0.15)
        # Shortcodes expand through the same filter
        if "[gallery]" in content:
            content = self.registry.apply_filters("the_content", content.replace("[gallery]", "<gallery/>"))
        return content

    def handle_request(self) -> str:
        self.registry.do_action("init")
        self.registry.do_action("wp_loaded")
        title = self.registry.apply_filters("the_title", "hello world")
        body = self.registry.apply_filters("the_content", "Post body [gallery]")
        self.registry.do_action("save_post", 42)
        self.registry.do_action("shutdown")
        return f"<h1>{title}</h1>{body}"


def demo_command(args: argparse.Namespace) -> int:
    """
    Execute the 'demo' command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        config = _load_config(args)

        registry = InMemoryHookRegistry()
        site = DemoSite(registry, scale=args.scale)
        site.install_plugins()

        session = MonitorSession(config)
        start_if_requested(session, registry, {config.monitor.trigger_param: "1"}, config)
        site.handle_request()
        session.stop()

        report = ReportBuilder(config).build(session)

        output_location: Optional[str] = None
        if args.export or args.out:
            if args.out:
                config.sink.output_dir = args.out
            if args.jsonl:
                config.sink.write_jsonl = True
            if args.json_pretty:
                config.sink.json_indent = 2
            output_location = _create_sink(config).write(report)

        print(render_table(report, precision=config.report.precision, limit=args.limit))
        if output_location:
            print(f"Report file: {output_location}")
        return 0

    except HookMonitorError as e:
        logger.error(f"Monitoring error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error during demo run")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2


def show_command(args: argparse.Namespace) -> int:
    """
    Execute the 'show' command: render an exported report.

    Returns:
        Exit code (0 success, 1 for missing input or template)
    """
    try:
        config = _load_config(args)
        path = Path(args.report)
        if not path.is_file():
            print(f"\n✗ Error: report file not found: {path}\n", file=sys.stderr)
            return 1

        report = deserialize_report_from_json(path.read_text(encoding="utf-8"))
        if args.slow_threshold is not None:
            report.summary.slow_threshold_seconds = args.slow_threshold

        if args.template_dir:
            config.report.template_dir = args.template_dir
        renderer = ReportRenderer.from_config(config)
        renderer.slow_threshold_seconds = report.summary.slow_threshold_seconds
        rendered = renderer.render(report, args.template or config.report.template)

        if args.output:
            Path(args.output).write_text(rendered, encoding="utf-8")
            print(f"Rendered report written to {args.output}")
        else:
            print(rendered)
        return 0

    except HookMonitorError as e:
        logger.error(f"Render error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        logger.exception("Failed to read report")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "demo":
        return demo_command(args)
    if args.command == "show":
        return show_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
