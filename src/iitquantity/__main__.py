"""Command-line interface."""
import sys

from iitquantity.app.main import main

if __name__ == "__main__":
    sys.exit(main())
