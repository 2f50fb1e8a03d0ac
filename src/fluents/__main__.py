"""Run the fluents command line with ``python -m fluents``."""

from fluents.cli import app

if __name__ == "__main__":
    app()
