"""Terminal presentation helpers (rich styles and icons)."""

# Rich style names, readable on both dark and light terminals.
COLORS = {
    "error": "red",
    "warning": "yellow",
    "muted": "#808080",
}

ICONS = {
    "error": "✗",
    "warning": "⚠️",
}


def styled(kind: str, text: str) -> str:
    """Wrap *text* in rich markup for the named color."""
    style = COLORS[kind]
    return f"[{style}]{text}[/]"
