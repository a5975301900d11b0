import argparse
import os
import sys
import logging

from .alignment import AlignmentError
from .api import TextAligner
from .output import OutputFormatter
from .reader import LINES_PROMPT, prompt_mode
from .utils import build_config_from_args


def configure_logging(verbose: bool):
    package_logger = logging.getLogger("text_aligner")
    if verbose:
        package_logger.setLevel(logging.DEBUG)
        for handler in package_logger.handlers:
            handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
    else:
        package_logger.setLevel(logging.INFO)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="text-aligner",
        description="Align text lines left, right, centered or justified",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  1 / left     2 / right     3 / center     4 / justify

Examples:
  text-aligner                         (interactive, prompts for lines and mode)
  text-aligner -i poem.txt -m center
  printf 'a b c\\nelephant\\n' | text-aligner -m justify --report
        """,
    )

    parser.add_argument(
        "-i", "--input", required=False, help="Read lines from this file instead of stdin"
    )
    parser.add_argument(
        "-o", "--output", required=False, help="Write aligned lines to this file"
    )
    parser.add_argument(
        "-m",
        "--mode",
        required=False,
        help="Alignment mode (1-4 or left/right/center/justify); prompts if omitted",
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=None,
        help="Maximum number of lines to read (default: 100)",
    )
    parser.add_argument(
        "--max-line-length",
        type=int,
        default=None,
        help="Line buffer size; longer lines are truncated (default: 1024)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a padding summary to stderr after the aligned lines",
    )
    parser.add_argument(
        "--level",
        choices=sorted(OutputFormatter.OUTPUT_LEVELS),
        default=None,
        help="Report detail level (default: normal)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger = logging.getLogger("text_aligner.cli")

    try:
        config = build_config_from_args(args)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 1

    if args.input and not os.path.exists(args.input):
        logger.error(f"Error: Input file '{args.input}' does not exist")
        return 1

    aligner = TextAligner(config)

    # Prompts go to stderr so stdout carries only aligned lines
    try:
        if args.input:
            with open(args.input, "r", encoding="utf-8") as f:
                lines = aligner.read(f)
        else:
            sys.stderr.write(LINES_PROMPT + "\n")
            lines = aligner.read(sys.stdin)

        mode = args.mode
        if mode is None:
            mode = prompt_mode(sys.stdin, sys.stderr)
            sys.stderr.write("\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error: {e}")
        return 1

    try:
        result = aligner.align(lines, mode)
    except AlignmentError as e:
        logger.error(f"Error: {e}")
        return 1

    rendered = OutputFormatter.format_lines(result.lines)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(rendered)
        logger.info(f"Aligned lines written: {os.path.abspath(args.output)}")
    else:
        sys.stdout.write(rendered)
        sys.stdout.flush()

    if args.report:
        sys.stderr.write(aligner.report(result, lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
