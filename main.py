#!/usr/bin/env python3
"""
Directory Edit Tool - Main Entry

Edit the entries of a directory as text in $EDITOR:
- change a name to rename the entry
- remove a line to delete the entry

Usage:
    python main.py                # Edit the current directory
    python main.py ./photos       # Edit ./photos
    python main.py -d ./photos    # Dry run
    python main.py -i ./photos    # Confirm each action
    python main.py -f ./photos    # Delete directories without asking
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    from cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
