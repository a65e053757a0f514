"""Allow running flacman as ``python -m flacman``."""

from flacman.cli.main import app

if __name__ == "__main__":
    app()
