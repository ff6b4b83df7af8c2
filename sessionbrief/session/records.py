"""Session record models and the transcript line parser."""

import json
from typing import Annotated, Any, Iterator, Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ContentBlock(BaseModel):
    """One element of a block-list message body."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    text: str | None = None


class TextContent(BaseModel):
    """Message body given as a plain string."""

    kind: Literal["text"] = "text"
    value: str = ""

    @property
    def text(self) -> str:
        return self.value


class BlockContent(BaseModel):
    """Message body given as an ordered list of content blocks."""

    kind: Literal["blocks"] = "blocks"
    blocks: list[ContentBlock] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenate block texts in order, without any separator."""
        return "".join(b.text for b in self.blocks if b.text is not None)


Content = Annotated[TextContent | BlockContent, Field(discriminator="kind")]


class Message(BaseModel):
    """The conversational payload nested in a session record."""

    model_config = ConfigDict(extra="ignore")

    role: str
    content: Content = Field(default_factory=TextContent)
    timestamp: Any = None

    @field_validator("content", mode="before")
    @classmethod
    def _tag_content(cls, value: Any) -> Any:
        """Resolve the raw string-or-list body into a tagged variant."""
        if value is None:
            return {"kind": "text", "value": ""}
        if isinstance(value, str):
            return {"kind": "text", "value": value}
        if isinstance(value, list):
            return {
                "kind": "blocks",
                "blocks": [item for item in value if isinstance(item, dict)],
            }
        return value

    @property
    def text(self) -> str:
        return self.content.text


class SessionRecord(BaseModel):
    """
    One parsed line of a session transcript.

    Records without a ``message`` are structural metadata (session
    headers, summaries, ...) and never count as conversation.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Metadata only; never decides whether a record is usable.
    session_id: Any = Field(default=None, alias="sessionId")
    cwd: Any = None
    timestamp: Any = None
    message: Message | None = None
    is_meta: bool = Field(default=False, alias="isMeta")

    @field_validator("is_meta", mode="before")
    @classmethod
    def _only_true_flags(cls, value: Any) -> bool:
        return value is True


def parse_line(line: str) -> SessionRecord | None:
    """Parse one transcript line, returning None for blank or malformed input."""
    line = line.strip()
    if not line:
        return None
    try:
        return SessionRecord.model_validate(json.loads(line))
    except (json.JSONDecodeError, ValidationError):
        return None


class Transcript:
    """
    Lazy, restartable view of the records in a transcript.

    Each iteration re-splits the text and yields the records that parse,
    in line order. Blank and malformed lines are dropped.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[SessionRecord]:
        skipped = 0
        for line in self.text.split("\n"):
            record = parse_line(line)
            if record is None:
                if line.strip():
                    skipped += 1
                continue
            yield record
        if skipped:
            logger.debug(f"Skipped {skipped} malformed transcript line(s)")
