"""Entrypoint for `python -m tgplay`."""

from .cli import main


if __name__ == "__main__":
    main()
