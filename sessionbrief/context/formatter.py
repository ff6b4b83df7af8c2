"""Rendering of assembled context into injectable text."""

from sessionbrief.context.assembler import AssembledContext, Turn

MISSION_HEADER = "ORIGINAL MISSION:"
RECENT_HEADER = "RECENT CONTEXT:"
LABELS = {"user": "Previous User:", "assistant": "Previous Assistant:"}


def format_turn(turn: Turn) -> list[str]:
    lines = []
    if turn.user is not None:
        lines.append(f"{LABELS['user']} {turn.user.text}")
    if turn.assistant is not None:
        lines.append(f"{LABELS['assistant']} {turn.assistant.text}")
    return lines


def format_context(context: AssembledContext) -> str:
    """Render the mission line and the recent-context block.

    Either part is omitted when it has nothing to show. Callers must not
    pass an empty context.
    """
    if context.is_empty:
        raise ValueError("cannot format an empty context")

    sections = []
    if context.mission is not None:
        sections.append(f"{MISSION_HEADER} {context.mission}")

    if context.recent:
        lines = [RECENT_HEADER]
        for turn in context.recent:
            lines.extend(format_turn(turn))
        sections.append("\n".join(lines))

    return "\n\n".join(sections)
