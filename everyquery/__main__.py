"""Application entry point."""

import argparse
import shutil
from collections.abc import Sequence

from rich.console import Console

from .app.config import load_config, save_config
from .app.table import results_table
from .common.app import app_dirs
from .common.log import configure_logging
from .engine import configure_global_engine
from .engine.sdk import EverythingSDK
from .query import Excluded, Included, ItemMetadata, ResultRange, Search, SortKey, SortOrder, search, search_regex

METADATA_CHOICES = {flag.name.lower().replace("_", "-"): flag for flag in ItemMetadata}
SORT_CHOICES = {key.value.replace("_", "-"): key for key in SortKey}


def reset_all() -> None:
    """Delete the app data directory."""
    if app_dirs.app_data_dir.exists():
        shutil.rmtree(app_dirs.app_data_dir)
        print(f"App data directory deleted: {app_dirs.app_data_dir}")
    else:
        print(f"App data directory does not exist: {app_dirs.app_data_dir}")


def build_parser() -> argparse.ArgumentParser:
    """Command-line arguments."""
    parser = argparse.ArgumentParser(prog="everyquery", description="Query the Everything file index")
    parser.add_argument("pattern", nargs="?", help="Everything search syntax, or a regex with --regex")
    parser.add_argument("--regex", action="store_true", help="Treat the pattern as a regular expression")
    parser.add_argument("--match-case", action="store_true", help="Case-sensitive matching")
    parser.add_argument("--match-path", action="store_true", help="Match against full paths")
    parser.add_argument("--whole-word", action="store_true", help="Match whole words only")
    parser.add_argument("--sort", choices=sorted(SORT_CHOICES), default="name", help="Sort key")
    parser.add_argument("--descending", action="store_true", help="Sort in descending order")
    parser.add_argument(
        "--metadata",
        nargs="+",
        choices=sorted(METADATA_CHOICES),
        default=[],
        help="Metadata fields to fetch",
    )
    parser.add_argument("--offset", type=int, default=0, help="Index of the first result")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of results")
    parser.add_argument("--all", action="store_true", help="Return every result, ignoring --offset and --limit")
    parser.add_argument("--dll", default=None, help="Path to Everything64.dll")
    parser.add_argument("--log-level", type=str.upper, default=None, help="Logging level (default from config)")
    parser.add_argument("--temp", action="store_true", help="Run with a temporary data directory")
    parser.add_argument("--reset", action="store_true", help="Delete all app data")
    return parser


def build_search(args: argparse.Namespace) -> Search:
    """Turn parsed arguments into a search."""
    query = search_regex(args.pattern) if args.regex else search(args.pattern)
    query = (
        query.match_case(args.match_case)
        .match_path(args.match_path)
        .match_whole_word(args.whole_word)
        .sort_by(SORT_CHOICES[args.sort], SortOrder.DESCENDING if args.descending else SortOrder.ASCENDING)
    )
    for name in args.metadata:
        query = query.request_metadata(METADATA_CHOICES[name])
    return query


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.reset:
        reset_all()
        return

    if args.pattern is None:
        parser.error("a search pattern is required")

    if args.temp:
        app_dirs.use_temp_app_data_dir()

    config = load_config()
    if not app_dirs.app_config_path.exists():
        save_config(config)
    configure_logging((args.log_level or config.log_level).upper())
    engine = configure_global_engine(EverythingSDK(args.dll or config.dll_path))

    query = build_search(args)
    if args.all:
        items = query.query_all(engine=engine)
    else:
        limit = config.default_limit if args.limit is None else args.limit
        items = query.query_range(ResultRange(Included(args.offset), Excluded(args.offset + limit)), engine=engine)

    console = Console()
    console.print(results_table(items))
    console.print(f"{len(items)} results", style="dim")


if __name__ == "__main__":
    main()
