"""Allow running recsort as ``python -m recsort``."""

from recsort.cli.main import app

if __name__ == "__main__":
    app()
