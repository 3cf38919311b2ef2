"""Common CLI utilities for scholar_parser scripts."""

from scholar_parser.cli.args import add_execute_argument, add_layout_argument
from scholar_parser.cli.logging import print_execute_header, setup_logging

__all__ = [
    "add_execute_argument",
    "add_layout_argument",
    "setup_logging",
    "print_execute_header",
]
