"""Module entry point for ``python -m gridpaths``."""

from gridpaths.cli import main

if __name__ == "__main__":
    main()
