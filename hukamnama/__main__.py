"""Module entrypoint for running Hukamnama as ``python -m hukamnama``."""

from __future__ import annotations

from hukamnama.cli import main


if __name__ == "__main__":
    main()
