"""Module entrypoint for ``python -m dirlister``."""

from .cli import main


if __name__ == "__main__":
    main()
