"""Entry point for `python -m ccost`."""

import sys


def main():
    from ccost.app import run
    sys.exit(run())


if __name__ == "__main__":
    main()
