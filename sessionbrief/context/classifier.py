"""Classification of session records into usable conversation messages."""

import re
from dataclasses import dataclass

from sessionbrief.session.records import SessionRecord

ROLES = ("user", "assistant")

# Text injected by tooling or the client rather than typed by a person.
# Matched against the start of the trimmed message text.
SYNTHETIC_MARKERS: dict[str, re.Pattern[str]] = {
    "command-name": re.compile(r"<command-name>"),
    "command-message": re.compile(r"<command-message>"),
    "command-args": re.compile(r"<command-args>"),
    "command-stdout": re.compile(r"<local-command-stdout>"),
    "caveat": re.compile(r"Caveat:"),
}


@dataclass(frozen=True)
class UsableMessage:
    """A user or assistant message that survived classification."""

    role: str
    text: str


def matching_marker(text: str) -> str | None:
    """Return the name of the synthetic marker *text* starts with, if any."""
    stripped = text.lstrip()
    for name, pattern in SYNTHETIC_MARKERS.items():
        if pattern.match(stripped):
            return name
    return None


def is_synthetic(text: str) -> bool:
    return matching_marker(text) is not None


def classify(record: SessionRecord) -> UsableMessage | None:
    """
    Convert a record into a UsableMessage, or reject it.

    A record is rejected when it has no message, its role is not
    user/assistant, it is flagged isMeta, its text is blank, or its
    text starts with a synthetic command/caveat marker.
    """
    msg = record.message
    if msg is None or msg.role not in ROLES or record.is_meta:
        return None

    text = msg.text.strip()
    if not text or is_synthetic(text):
        return None

    return UsableMessage(role=msg.role, text=text)
