"""
cli_entry.py - CLI Entry Point

Edit a directory listing in $EDITOR, then rename and delete accordingly.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from core import EditOptions, StructuralError, edit_directory, messages

from .cli_interactive import confirm


__version__ = "1.0.0"


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="diredit",
        description="Rename or delete directory entries by editing a listing in $EDITOR",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Lines removed from the listing are deleted, changed names are renamed.

Examples:
  # Edit the current directory
  diredit

  # Preview what would happen in ./photos
  diredit -d ./photos

  # Confirm each action
  diredit -i ./photos
"""
    )

    parser.add_argument("directory", nargs="?", default=".", metavar="DIR",
                        help="Directory to edit (default: current directory)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Verbose mode, show what is done")
    parser.add_argument("-d", "--dry-run", action="store_true",
                        help="Dry run, like verbose but change nothing")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Prompt before each action")
    parser.add_argument("-f", "--force", action="store_true",
                        help="Remove directories without prompting")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    if not directory.is_dir():
        messages.error(f"not a directory: {args.directory}")
        return 1

    # Dry run reports like verbose
    options = EditOptions.resolve(
        verbose=args.verbose or args.dry_run,
        dry_run=args.dry_run,
        interactive=args.interactive,
        force=args.force,
    )

    try:
        result = edit_directory(directory, options, confirm)
    except StructuralError as e:
        messages.error(str(e))
        return 1
    except KeyboardInterrupt:
        messages.error("interrupted")
        return 1

    if options.verbose and (result.succeeded or result.failed or result.skipped):
        print(result.summary())

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
