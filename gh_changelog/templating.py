"""Jinja2 environment for gh_changelog text templates."""

from __future__ import annotations

from importlib import resources
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, pass_context
from jinja2.runtime import Context

ANSI_STYLES = {
    "underline": "\033[4m",
    "green": "\033[32m",
}
ANSI_RESET = "\033[0m"

_ENV: Environment | None = None


@pass_context
def _cell(
    context: Context, value: Any, width: int = 0, style: Optional[str] = None
) -> str:
    """Pad a value to a column width, styling it when colour is enabled.

    Padding is added outside the escape codes so columns stay aligned.
    """
    text = str(value)
    padding = " " * max(width - len(text), 0)
    if style and context.get("color"):
        text = f"{ANSI_STYLES[style]}{text}{ANSI_RESET}"
    return text + padding


def get_environment() -> Environment:
    """Return a cached Jinja environment configured for package templates."""
    global _ENV
    if _ENV is None:
        template_dir = resources.files(__package__) / "templates"
        loader = FileSystemLoader(str(template_dir))
        _ENV = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        _ENV.filters["cell"] = _cell
    return _ENV
