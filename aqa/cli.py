"""
Command-line driver for the pseudocode front end.

    aqa program.txt            # print the value of the expression
    aqa --trace program.txt    # also log tokens and tree to stderr

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__, run_file
from .errors import AqaError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aqa",
        description="Evaluate an AQA pseudocode expression file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    aqa sum.txt                # Print the resulting value
    aqa --trace sum.txt        # Show the token sequence and tree as well
        """
    )

    parser.add_argument('file', help='Path to a UTF-8 pseudocode source file')
    parser.add_argument('--trace', action='store_true',
                        help='Log the token sequence, expression tree and value')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        value = run_file(args.file)
    except AqaError as e:
        print(e.diagnostic.render(), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
