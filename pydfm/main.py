from __future__ import annotations
import sys
from pydfm.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pydfm.main` or `python -m pydfm` (via __main__)."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
