"""
Result Formatting.

Deciding how much to show (an interactive prompt) is kept apart from
rendering (a pure function of document and mode).

Document shape, every field optional:
    {"queryresult": {"numpods": int, "pods": [
        {"title": str, "numsubpods": int, "subpods": [{"plaintext": str}]}
    ]}}
"""

from enum import Enum
from typing import Any

from rich.console import Console
from rich.prompt import Prompt

TITLE_COLOR = "\x1b[33m"
RESET = "\x1b[0m"

NO_TITLE = "No title"
NO_PLAINTEXT = "No plaintext"

SUMMARY_POD_LIMIT = 2

FULL_RESPONSE_PROMPT = "Show full response?"
CHOICES = ["yes", "no"]


class RenderMode(str, Enum):
    """How many pods to render."""

    FULL = "full"
    SUMMARY = "summary"


def mode_from_choice(choice: str) -> RenderMode:
    """Map the yes/no answer to a render mode."""
    return RenderMode.SUMMARY if choice.strip().lower() == "no" else RenderMode.FULL


def ask_render_mode(console: Console | None = None) -> RenderMode:
    """Ask whether to show the full response. Defaults to yes, also on end of input."""
    try:
        choice = Prompt.ask(
            FULL_RESPONSE_PROMPT,
            choices=CHOICES,
            default=CHOICES[0],
            console=console,
        )
    except EOFError:
        choice = CHOICES[0]
    return mode_from_choice(choice)


def _count(value: Any) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return 0


def _field(value: Any, key: str) -> Any:
    return value.get(key) if isinstance(value, dict) else None


def _items(value: Any, key: str, declared: Any) -> list[Any]:
    """First `declared` entries of the list at key, clamped to what exists."""
    entries = _field(value, key)
    if not isinstance(entries, list):
        return []
    return entries[:_count(declared)]


def _text(value: Any, key: str, fallback: str) -> str:
    text = _field(value, key)
    return text if isinstance(text, str) else fallback


def render(document: Any, mode: RenderMode = RenderMode.FULL) -> str:
    """
    Render a result document as plain text.

    Each pod contributes a colored title line followed by one line per
    subpod. Counts come from numpods/numsubpods and are clamped to the
    actual array lengths; SUMMARY shows at most two pods.

    Args:
        document: Decoded response body
        mode: FULL for every pod, SUMMARY for the first two

    Returns:
        Newline-terminated lines, or "" when there are no pods
    """
    result = _field(document, "queryresult")
    declared = _count(_field(result, "numpods"))
    if mode is RenderMode.SUMMARY:
        declared = min(declared, SUMMARY_POD_LIMIT)

    lines: list[str] = []
    for pod in _items(result, "pods", declared):
        lines.append(f"{TITLE_COLOR}{_text(pod, 'title', NO_TITLE)}{RESET}\n")
        for subpod in _items(pod, "subpods", _field(pod, "numsubpods")):
            lines.append(f"{_text(subpod, 'plaintext', NO_PLAINTEXT)}\n")
    return "".join(lines)
