"""
Allow running the CLI with ``python -m sleepcycle``.
"""

from .cli.app import app

if __name__ == "__main__":
    app()
