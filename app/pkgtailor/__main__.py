"""Allow running pkgtailor as ``python -m pkgtailor``."""

from pkgtailor.cli.main import app

if __name__ == "__main__":
    app()
