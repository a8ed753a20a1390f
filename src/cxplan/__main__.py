"""Main entry point for the cxplan CLI.

Usage:
    python -m cxplan --help
    cxplan --help  # If installed via pip/uv
"""

from cxplan.cli import main

if __name__ == "__main__":
    main()
