"""Session transcripts: record models, parsing and file access."""

from sessionbrief.session.reader import SessionFileReader, SessionReader
from sessionbrief.session.records import (
    BlockContent,
    ContentBlock,
    Message,
    SessionRecord,
    TextContent,
    Transcript,
    parse_line,
)

__all__ = [
    "BlockContent",
    "ContentBlock",
    "Message",
    "SessionFileReader",
    "SessionReader",
    "SessionRecord",
    "TextContent",
    "Transcript",
    "parse_line",
]
