"""User interface helpers for DIFFY-SETUP."""

from diffy_setup.ui.prompts import custom_style, prompt_input, prompt_secret

__all__ = [
    "custom_style",
    "prompt_input",
    "prompt_secret",
]
