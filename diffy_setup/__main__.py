"""Entry point for running diffy_setup as a module.

This allows running the application with:
    python -m diffy_setup project-create
"""

from diffy_setup.cli import app

if __name__ == "__main__":
    app()
