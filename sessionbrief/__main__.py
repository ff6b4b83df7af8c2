"""Entry point for ``python -m sessionbrief``."""

from sessionbrief.cli.commands import app

if __name__ == "__main__":
    app()
