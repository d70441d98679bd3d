"""Checkout entry point; the command line lives in ``wallgen.cli``.

Run `python run.py --help` for details.
"""

import sys

from wallgen.cli import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
