# src/catai/cli.py
import sys
import argparse
import os
from pathlib import Path
from typing import List, Optional

# Module imports
from catai.config import DEFAULT_MAX_SIZE, __version__
from catai.core.concat import concatenate
from catai.core.gate import Prompt
from catai.core.patterns import base_directory, display_name
from catai.core.pipeline import select_files
from catai.core.sinks import deliver, print_summary
from catai.errors import CataiError
from catai.models import Configuration, OutputRecord
from catai.utils.formatting import parse_max_size
from catai.utils.terminal import terminal_prompt

EXAMPLES = """\
examples:
  catai src/
  catai src/ --include '*.ts' '*.tsx'
  catai . --exclude '**/*.test.js' --output context.txt
  catai src/ --copy
"""


class CataiArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on usage errors; catai reports every argument error with 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def create_arg_parser():
    parser = CataiArgumentParser(
        prog="catai",
        description="Concatenate files for LLM context",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="+", help="Paths to concatenate")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s version {__version__}")
    parser.add_argument("-o", "--output", type=str, default=None, help="Write to file instead of stdout")
    parser.add_argument(
        "--include",
        nargs="+",
        default=[],
        metavar="PATTERN",
        help="Include only files matching these glob patterns (e.g., '*.ts' '**/*.md')",
    )
    parser.add_argument(
        "--exclude",
        nargs="+",
        default=[],
        metavar="PATTERN",
        help="Exclude files matching these glob patterns (e.g., '**/*.test.js')",
    )
    parser.add_argument(
        "--max-size", "--maxSize",
        dest="max_size",
        default=DEFAULT_MAX_SIZE,
        metavar="SIZE",
        help="Max file size before asking (default: 100k, e.g. '1mb', '500k')",
    )
    parser.add_argument("--yes", action="store_true", help="Skip all prompts, include large files")
    parser.add_argument(
        "-c", "--copy",
        action="store_true",
        help="Copy output to clipboard (auto-detects Wayland/X11)",
    )
    return parser


def build_configuration(args: argparse.Namespace) -> Configuration:
    """Validates parsed arguments. Raises InvalidSizeError before anything touches the filesystem."""
    return Configuration(
        paths=tuple(args.paths),
        max_size=parse_max_size(args.max_size),
        output=args.output,
        include=tuple(args.include),
        exclude=tuple(args.exclude),
        yes=args.yes,
        copy=args.copy,
    )


def run(config: Configuration, prompt: Prompt = terminal_prompt, cwd: Optional[Path] = None) -> OutputRecord:
    base = base_directory(config.paths, cwd or Path(os.getcwd()))
    selection = select_files(config, prompt, base)
    record = concatenate(selection.included, lambda p: display_name(p, base))

    print_summary(selection, record, config, base)
    deliver(record, config)
    return record


def main(argv: Optional[List[str]] = None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_intermixed_args(argv)
        config = build_configuration(args)

        # 2. Select, concatenate, deliver
        run(config)

    except CataiError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
