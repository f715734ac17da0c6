"""Entry point: python -m gotodir [<option>] <alias> [<directory>]"""

import sys

from gotodir.cli import main

if __name__ == "__main__":
    sys.exit(main())
