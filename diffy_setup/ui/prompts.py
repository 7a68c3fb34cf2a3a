"""Interactive prompts for DIFFY-SETUP.

This module provides Questionary-based user input prompts with
consistent styling and error handling.
"""

from __future__ import annotations

import questionary
from questionary import Style

from diffy_setup.utils.errors import UserCancelledError
from diffy_setup.utils.logging import log_message

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("instruction", "fg:white"),
        ("text", ""),
    ]
)


def prompt_input(message: str, default: str = "") -> str:
    """Prompt for a single line of text.

    Args:
        message: Prompt message
        default: Default value

    Returns:
        User input string

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled input prompt")

        log_message(f"User input: {result[:50]}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_secret(message: str) -> str:
    """Prompt for a secret with masked input.

    The entered value is never logged.

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt secret: {message.splitlines()[0] if message else ''}")

    try:
        result = questionary.password(
            message,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled secret prompt")

        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "custom_style",
    "prompt_input",
    "prompt_secret",
]
