"""Main entry point for the vCenter ticket command line tool."""

import sys

from vcenter_ticket.cli import main


if __name__ == "__main__":
    sys.exit(main())
