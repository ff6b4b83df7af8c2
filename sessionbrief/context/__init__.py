"""Conversation context extraction pipeline."""

from sessionbrief.context.assembler import AssembledContext, Turn, assemble, build_turns
from sessionbrief.context.classifier import (
    SYNTHETIC_MARKERS,
    UsableMessage,
    classify,
    is_synthetic,
    matching_marker,
)
from sessionbrief.context.extractor import (
    DEFAULT_TURN_LIMIT,
    build_conversation_context,
    extract_conversation_context,
)
from sessionbrief.context.formatter import format_context

__all__ = [
    "AssembledContext",
    "DEFAULT_TURN_LIMIT",
    "SYNTHETIC_MARKERS",
    "Turn",
    "UsableMessage",
    "assemble",
    "build_conversation_context",
    "build_turns",
    "classify",
    "extract_conversation_context",
    "format_context",
    "is_synthetic",
    "matching_marker",
]
