"""Conversation context extraction from session transcripts."""

from pathlib import Path

from loguru import logger

from sessionbrief.config.loader import load_config
from sessionbrief.config.schema import ContextConfig
from sessionbrief.context.assembler import assemble
from sessionbrief.context.classifier import classify
from sessionbrief.context.formatter import format_context
from sessionbrief.session.reader import SessionFileReader, SessionReader
from sessionbrief.session.records import Transcript

DEFAULT_TURN_LIMIT = ContextConfig.model_fields["turn_limit"].default


def build_conversation_context(text: str, turn_limit: int = DEFAULT_TURN_LIMIT) -> str | None:
    """
    Summarize transcript text into mission + recent turns.

    Args:
        text: Full JSONL transcript text.
        turn_limit: Maximum number of recent turns to keep.

    Returns:
        The formatted summary, or None when nothing usable was found.
    """
    usable = (m for m in map(classify, Transcript(text)) if m is not None)
    context = assemble(usable, turn_limit)
    if context.is_empty:
        return None
    return format_context(context)


async def extract_conversation_context(
    path: str | Path,
    turn_limit: int | None = None,
    reader: SessionReader | None = None,
) -> str | None:
    """
    Read a session file and summarize it.

    Args:
        path: Session file path.
        turn_limit: Maximum recent turns; defaults to the configured value.
        reader: Session file collaborator; defaults to a SessionFileReader
            built from the loaded config.

    Returns:
        The formatted summary, or None when the transcript has no usable content.

    Raises:
        FileNotFoundError, OSError: Propagated from the reader.
    """
    if turn_limit is None or reader is None:
        config = load_config()
        if turn_limit is None:
            turn_limit = config.context.turn_limit
        if reader is None:
            reader = SessionFileReader(config.claude_path)

    text = await reader.read_session_file(path)
    result = build_conversation_context(text, turn_limit)
    if result is None:
        logger.debug(f"No conversation context found in {path}")
    else:
        logger.debug(f"Extracted {len(result)} chars of context from {path}")
    return result
