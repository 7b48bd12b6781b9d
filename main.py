"""
Fasty - Command Line Entry Point

Dem so lan xuat hien cua mot tap ky tu trong nhieu text files,
tuan tu hoac song song, va in ra tong so + thoi gian (microseconds).

Usage:
    fasty data/ notes.txt --chars ac --mode both
"""

import argparse
import json
import sys
from typing import Callable, Dict, List, Optional, Sequence

from config.counting_config import (
    DEFAULT_MATCH_CHARS,
    CountingConfig,
    get_worker_count,
)
from core.counting import (
    CountingError,
    CountOutput,
    build_match_set,
    count_files_parallel,
    count_files_sequential,
)
from core.file_collector import collect_paths
from core.logging_config import flush_logs, log_error, log_info, set_debug_mode

MODES = ("sequential", "parallel", "both")

EXIT_OK = 0
EXIT_COUNTING_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fasty",
        description="Count occurrences of single characters across text files.",
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to scan")
    parser.add_argument(
        "-c",
        "--chars",
        default=DEFAULT_MATCH_CHARS,
        help=f"Characters to count (default: {DEFAULT_MATCH_CHARS!r})",
    )
    parser.add_argument(
        "-m", "--mode", choices=MODES, default="parallel", help="Counting strategy"
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Parallel worker count (default: $FASTY_WORKERS or 8)",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern to skip inside directories (repeatable)",
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not apply .gitignore files of scanned directories",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _config_from_args(args: argparse.Namespace) -> CountingConfig:
    workers = args.workers if args.workers is not None else get_worker_count()
    return CountingConfig(
        workers=workers,
        match_chars=args.chars,
        excluded_patterns=tuple(args.exclude),
        use_gitignore=not args.no_gitignore,
    )


def _render(results: Dict[str, CountOutput], as_json: bool) -> str:
    if as_json:
        payload = {
            mode: {"counts": output.counts, "elapsed_us": output.elapsed}
            for mode, output in results.items()
        }
        if len(results) > 1:
            payload["consistent"] = len({o.counts for o in results.values()}) == 1
        return json.dumps(payload)

    lines: List[str] = []
    for mode, output in results.items():
        prefix = f"{mode}: " if len(results) > 1 else ""
        lines.append(f"{prefix}counts:  {output.counts}")
        lines.append(f"{prefix}elapsed: {output.elapsed} us")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        set_debug_mode(True)

    config = _config_from_args(args)
    if config.workers < 1:
        parser.error(f"--workers must be >= 1, got {config.workers}")

    try:
        match_set = build_match_set(config.match_chars)
    except ValueError as e:
        parser.error(str(e))

    file_paths = collect_paths(
        args.paths,
        excluded_patterns=config.excluded_patterns,
        use_gitignore=config.use_gitignore,
    )
    log_info(f"Counting {len(match_set)} chars across {len(file_paths)} files")

    runners: Dict[str, Callable[[], CountOutput]] = {
        "sequential": lambda: count_files_sequential(file_paths, match_set),
        "parallel": lambda: count_files_parallel(
            file_paths, match_set, workers=config.workers
        ),
    }
    selected = ["sequential", "parallel"] if args.mode == "both" else [args.mode]

    results: Dict[str, CountOutput] = {}
    try:
        for mode in selected:
            results[mode] = runners[mode]()
    except CountingError as e:
        log_error("Counting failed", e)
        flush_logs()
        return EXIT_COUNTING_FAILED

    print(_render(results, args.json))
    flush_logs()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
