"""
CLI entrypoint for dirliner package.
"""
import argparse
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from colorama import Fore, Style, init as colorama_init

from . import __version__
from .core import DEFAULT_IGNORE_FILE, DEFAULT_SOURCE, DEFAULT_TARGET, DirLiner, DirLinerResult

colorama_init()

BANNER = (
    "╔═══════════════════════════════════════╗\n"
    "║               DirLiner                ║\n"
    "║ Transform directories into flat files ║\n"
    "╚═══════════════════════════════════════╝\n"
)

EPILOG = """\
Examples:
  $ dirliner -s ./src -t ./dist            # Basic usage
  $ dirliner -s ./src -v                   # Verbose output
  $ dirliner -i "node_modules,*.log"       # Ignore patterns
  $ dirliner --ignore-file .customignore   # Custom ignore file
"""

_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_size(num_bytes: int) -> str:
    """Human-readable size, base 1024: ``0 B``, ``1 KB``, ``1.5 MB``."""
    size = float(num_bytes)
    unit = 0
    while size >= 1024 and unit < len(_UNITS) - 1:
        size /= 1024
        unit += 1
    text = f"{size:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit]}"


class ConsoleLogger:
    """Timestamped, colored progress lines on stdout."""

    def _emit(self, symbol: str, color: str, message: str) -> None:
        stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        prefix = f"{Style.DIM}[{stamp}]{Style.RESET_ALL}"
        print(f"{prefix} {color}{symbol} {message}{Style.RESET_ALL}", file=sys.stdout)

    def debug(self, message: str) -> None:
        self._emit("·", Style.DIM, message)

    def info(self, message: str) -> None:
        self._emit("ℹ", Fore.BLUE, message)

    def success(self, message: str) -> None:
        self._emit("✓", Fore.GREEN, message)

    def warning(self, message: str) -> None:
        self._emit("⚠", Fore.YELLOW, message)

    def error(self, message: str) -> None:
        self._emit("✖", Fore.RED, message)


def split_patterns(value: str) -> List[str]:
    return [p.strip() for p in value.split(",") if p.strip()]


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="dirliner",
        description="Transform directory structures into flat files.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    p.add_argument(
        "-s", "--source", type=Path, default=Path(DEFAULT_SOURCE), help="Source directory"
    )
    p.add_argument(
        "-t", "--target", type=Path, default=Path(DEFAULT_TARGET), help="Target directory"
    )
    p.add_argument(
        "-i",
        "--ignore",
        default="",
        help="Ignore patterns (comma-separated)",
    )
    p.add_argument(
        "--ignore-file",
        type=Path,
        default=Path(DEFAULT_IGNORE_FILE),
        help=f"File containing ignore patterns (default: {DEFAULT_IGNORE_FILE})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    return p.parse_args(argv)


def _print_summary(result: DirLinerResult, elapsed: float) -> None:
    stats = result.stats
    print(f"\n{Style.BRIGHT}Summary:{Style.RESET_ALL}")
    print(f"{Fore.BLUE}├─ Files Processed:{Style.RESET_ALL} {stats.files_processed}")
    print(f"{Fore.BLUE}├─ Directories Processed:{Style.RESET_ALL} {stats.directories_processed}")
    print(f"{Fore.YELLOW}├─ Files Ignored:{Style.RESET_ALL} {stats.files_ignored}")
    print(f"{Fore.YELLOW}├─ Directories Ignored:{Style.RESET_ALL} {stats.directories_ignored}")
    print(f"{Fore.YELLOW}├─ Files Overwritten:{Style.RESET_ALL} {stats.files_overwritten}")
    print(f"{Fore.GREEN}├─ Total Size:{Style.RESET_ALL} {format_size(stats.total_size)}")
    print(f"{Fore.MAGENTA}└─ Execution Time:{Style.RESET_ALL} {elapsed:.2f}s")


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        ns = _parse_args(argv)
        ignore_patterns = split_patterns(ns.ignore)

        print(Fore.CYAN + BANNER + Style.RESET_ALL)

        if ns.verbose:
            print(f"{Style.BRIGHT}Configuration:{Style.RESET_ALL}")
            print(f"{Fore.BLUE}├─ Source:{Style.RESET_ALL} {ns.source}")
            print(f"{Fore.BLUE}├─ Target:{Style.RESET_ALL} {ns.target}")
            print(
                f"{Fore.BLUE}├─ Ignore Patterns:{Style.RESET_ALL} "
                f"{Fore.YELLOW}{', '.join(ignore_patterns) or 'none'}{Style.RESET_ALL}"
            )
            print(f"{Fore.BLUE}└─ Ignore File:{Style.RESET_ALL} {Fore.YELLOW}{ns.ignore_file}{Style.RESET_ALL}\n")

        start = time.monotonic()
        dirliner = DirLiner(
            source=ns.source,
            target=ns.target,
            ignore_patterns=ignore_patterns,
            ignore_file=ns.ignore_file,
            verbose=ns.verbose,
            logger=ConsoleLogger() if ns.verbose else None,
        )
        result = dirliner.execute()

        if not result.success:
            print(f"{Fore.RED}Error: {result.error}{Style.RESET_ALL}", file=sys.stderr)
            sys.exit(1)

        _print_summary(result, time.monotonic() - start)
        print(f"\n{Fore.GREEN}Processing completed successfully!{Style.RESET_ALL}\n")

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
