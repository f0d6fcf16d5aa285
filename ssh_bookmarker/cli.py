"""Command line interface for ssh_bookmarker."""

from __future__ import annotations

import argparse
import logging
import sys

from ssh_bookmarker import __version__
from ssh_bookmarker.config import Config
from ssh_bookmarker.emitters import WeblocWriter, to_json
from ssh_bookmarker.services.discovery import HostDiscovery
from ssh_bookmarker.services.suggest import RankedSuggester
from ssh_bookmarker.utils.console import configure_logging

logger = logging.getLogger(__name__)

VERBOSITY_LEVELS = ["WARNING", "INFO", "DEBUG"]


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-c", "--ssh-config",
        dest="config_files",
        action="append",
        default=[],
        metavar="FILE",
        help="Add file to list of ssh config files",
    )
    common.add_argument(
        "-k", "--known-hosts",
        dest="known_hosts_files",
        action="append",
        default=[],
        metavar="FILE",
        help="Add file to list of known hosts",
    )
    common.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log more (repeat for debug output)",
    )
    return common


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="ssh-bookmarker",
        description="Create SSH bookmarks from ssh_config and known_hosts files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  ssh-bookmarker create ~/Library/SSH-Bookmarks
  ssh-bookmarker create -m example.com -M /^db/ ~/bookmarks
  ssh-bookmarker search web
  ssh-bookmarker serve

Patterns can be substring matches, or regexes if wrapped in //.
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ssh-bookmarker {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        metavar="<command>",
        title="Commands",
    )
    common = _common_options()

    create = subparsers.add_parser(
        "create",
        parents=[common],
        help="Generate bookmark files in OUTPUT_DIR",
    )
    create.add_argument(
        "-m", "--mosh",
        dest="mosh_patterns",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Emit a mosh bookmark for host names matching PATTERN",
    )
    create.add_argument(
        "-M", "--prevent-mosh",
        dest="prevent_mosh_patterns",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Prevent emitting a mosh bookmark for host names matching PATTERN",
    )
    create.add_argument(
        "--mosh-also",
        action="store_true",
        help="Emit mosh bookmarks in addition to ssh ones",
    )
    create.add_argument(
        "--include",
        dest="include_conditions",
        action="append",
        default=[],
        metavar="FILE,REGEX",
        help="Only emit hosts from FILE that match REGEX",
    )
    create.add_argument(
        "--exclude",
        dest="exclude_conditions",
        action="append",
        default=[],
        metavar="FILE,REGEX",
        help="Never emit hosts from FILE that match REGEX",
    )
    create.add_argument("output_dir", metavar="OUTPUT_DIR")
    create.set_defaults(func=cmd_create)

    search = subparsers.add_parser(
        "search",
        parents=[common],
        help="Print hosts matching QUERY as JSON, best match first",
    )
    search.add_argument("query", metavar="QUERY")
    search.add_argument("--limit", type=int, default=None, help="Maximum results")
    search.set_defaults(func=cmd_search)

    serve = subparsers.add_parser("serve", help="Run the MCP server")
    serve.add_argument("-v", "--verbose", action="count", default=0)
    serve.set_defaults(func=cmd_serve)

    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Build config from environment plus command line additions."""
    config = Config.from_env()
    config.add_config_files(getattr(args, "config_files", []))
    config.add_known_hosts_files(getattr(args, "known_hosts_files", []))

    settings = config.settings
    settings.mosh_patterns.extend(getattr(args, "mosh_patterns", []))
    settings.prevent_mosh_patterns.extend(getattr(args, "prevent_mosh_patterns", []))
    settings.mosh_also = settings.mosh_also or getattr(args, "mosh_also", False)
    settings.include_conditions.extend(getattr(args, "include_conditions", []))
    settings.exclude_conditions.extend(getattr(args, "exclude_conditions", []))

    if args.verbose:
        settings.log_level = VERBOSITY_LEVELS[min(args.verbose, len(VERBOSITY_LEVELS) - 1)]
    return config


def cmd_create(args: argparse.Namespace, config: Config) -> int:
    """Regenerate bookmark files."""
    discovery = HostDiscovery.from_config(config)
    writer = WeblocWriter(args.output_dir)
    writer.prepare()
    writer.write_all(discovery.discover())
    return 0


def cmd_search(args: argparse.Namespace, config: Config) -> int:
    """Print ranked suggestions as JSON."""
    limit = args.limit if args.limit is not None else config.max_results
    suggester = RankedSuggester(HostDiscovery.from_config(config))
    results = suggester.search(args.query, limit=limit)
    logger.debug("Got hosts: %s", results)
    print(to_json(results))
    return 0


def cmd_serve(args: argparse.Namespace, config: Config) -> int:
    """Run the MCP server until interrupted."""
    from ssh_bookmarker.server import run_server

    run_server(config)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = build_config(args)
        configure_logging(config.settings.log_level, config.settings.log_colors)
        return args.func(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
