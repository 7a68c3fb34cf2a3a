"""DIFFY-SETUP - Push Diffy credentials into a site's CircleCI project.

This package provides a Python CLI that collects a Diffy API key and
project id, validates them against the Diffy API and stores them as
CircleCI environment variables for a hosting-platform site.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "DIFFY-SETUP"
USER_AGENT = f"diffy-setup/{__version__}"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "USER_AGENT",
]
