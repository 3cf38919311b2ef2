"""
Argument parsing utilities for scholar_parser CLI.

Provides standard argument patterns used across scripts.
"""

from scholar_parser.parsing.layouts import available_layouts


def add_execute_argument(parser):
    """
    Add standard --execute argument to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Also write a timestamped log file under logs/ (default is console only)",
    )


def add_layout_argument(parser):
    """
    Add --layout and --site arguments to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--layout",
        choices=available_layouts(),
        default=None,
        help="Result layout of the pages (default: SCHOLAR_LAYOUT setting)",
    )
    parser.add_argument(
        "--site",
        default=None,
        help="Base URL for relative links (default: SCHOLAR_SITE setting)",
    )
