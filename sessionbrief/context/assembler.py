"""Mission detection and recent-turn windowing."""

from dataclasses import dataclass, field
from typing import Iterable

from loguru import logger

from sessionbrief.context.classifier import UsableMessage


@dataclass(frozen=True)
class Turn:
    """A user/assistant exchange; one side may be missing at the boundaries."""

    user: UsableMessage | None = None
    assistant: UsableMessage | None = None

    @property
    def is_partial(self) -> bool:
        return self.user is None or self.assistant is None


@dataclass
class AssembledContext:
    """The mission and the recent window, ready for formatting."""

    mission: str | None = None
    recent: list[Turn] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.mission is None and not self.recent


def find_mission(messages: list[UsableMessage]) -> int | None:
    """Index of the first user message, or None if there is none."""
    for i, m in enumerate(messages):
        if m.role == "user":
            return i
    return None


def build_turns(messages: list[UsableMessage]) -> list[Turn]:
    """
    Pair each user message with the assistant message right after it.

    A user message followed by another user message (or the end of the
    sequence) becomes a user-only turn. An assistant message with no
    pending user message becomes an assistant-only turn.
    """
    turns: list[Turn] = []
    pending: UsableMessage | None = None

    for m in messages:
        if m.role == "user":
            if pending is not None:
                turns.append(Turn(user=pending))
            pending = m
        elif pending is not None:
            turns.append(Turn(user=pending, assistant=m))
            pending = None
        else:
            turns.append(Turn(assistant=m))

    if pending is not None:
        turns.append(Turn(user=pending))
    return turns


def assemble(messages: Iterable[UsableMessage], limit: int) -> AssembledContext:
    """
    Assemble the mission and the last *limit* turns.

    The mission's own user message is reported only as the mission; if
    its turn lands in the window, only that turn's assistant side stays.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        raise ValueError(f"turn limit must be >= 0, got {limit}")

    messages = list(messages)
    mission_idx = find_mission(messages)
    mission = messages[mission_idx] if mission_idx is not None else None

    turns = build_turns(messages)
    window = turns[-limit:] if limit else []

    recent = []
    for turn in window:
        if mission is not None and turn.user is mission:
            if turn.assistant is None:
                continue
            turn = Turn(assistant=turn.assistant)
        recent.append(turn)

    logger.debug(
        f"Assembled {len(messages)} usable messages into {len(turns)} turns, "
        f"keeping {len(recent)} (limit={limit})"
    )
    return AssembledContext(
        mission=mission.text if mission is not None else None,
        recent=recent,
    )
