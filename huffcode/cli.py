#!/usr/bin/env python3
"""
cli.py : Huffman-code the first line of a text file and report on the result

The line is counted, turned into a Huffman tree, encoded, decoded again, and
the codes, their length distribution and the compression ratio are printed.

Usage:
    huffcode                      #Reads ./input.txt
    huffcode notes.txt --pause    #Waits for Enter before exiting
"""

import argparse
import logging
import sys

import yaml

from .compression import Compressor
from .config_loader import load_config
from .errors import HuffmanError
from .report import format_report

ERROR_FILE_OPEN = 1
ERROR_INPUT = 2
ERROR_CONFIG = 3

logger = logging.getLogger(__name__)


def setup_logger(level: str = "WARNING") -> logging.Logger:
    """Setup logging for the command-line run."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )
    return logging.getLogger("huffcode")


def read_first_line(path) -> str:
    with open(path, "r", encoding="utf-8", errors="strict") as f:
        return f.readline().rstrip("\r\n")


def print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Huffman-code one line of text and report statistics.")
    parser.add_argument("input", nargs="?", default=None,
                        help="text file whose first line is encoded (default from config: input.txt)")
    parser.add_argument("--config", default=None, help="YAML file merged over the packaged defaults")
    parser.add_argument("--log-level", default=None, help="logging level, e.g. INFO or DEBUG")
    parser.add_argument("--pause", action="store_true", help="wait for Enter before exiting")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        compressor = Compressor.from_config(config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print_error(f"Invalid configuration: {exc}")
        return ERROR_CONFIG
    setup_logger(args.log_level or (config.get("logging") or {}).get("level", "WARNING"))

    path = args.input or (config.get("input") or {}).get("path", "input.txt")
    try:
        text = read_first_line(path)
    except OSError as exc:
        logger.debug("Opening %s failed: %s", path, exc)
        print_error("Could not open input file.")
        return ERROR_FILE_OPEN
    except UnicodeDecodeError as exc:
        print_error(f"Input file is not valid UTF-8: {exc}")
        return ERROR_INPUT

    try:
        result = compressor.compress(text)
    except HuffmanError as exc:
        print_error(str(exc))
        return ERROR_INPUT

    print(format_report(result))

    if args.pause:
        print("\nPress Enter to exit...", end="", flush=True)
        sys.stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())
