"""``python -m iconls``: same behavior as the ``iconls`` console script."""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
