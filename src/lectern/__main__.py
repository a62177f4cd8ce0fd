"""Allow running Lectern as a module: ``python -m lectern``."""

from lectern.cli.main import app

if __name__ == "__main__":
    app()
