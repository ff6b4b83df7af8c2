"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContextConfig(BaseModel):
    """Conversation context extraction settings."""
    turn_limit: int = Field(default=3, ge=0)  # Recent turns kept after the mission


class SessionsConfig(BaseModel):
    """Where Claude Code keeps its session transcripts."""
    claude_dir: str = "~/.claude"


class Config(BaseSettings):
    """Root configuration for sessionbrief."""

    model_config = SettingsConfigDict(
        env_prefix="SESSIONBRIEF_",
        env_nested_delimiter="__",
    )

    context: ContextConfig = Field(default_factory=ContextConfig)
    sessions: SessionsConfig = Field(default_factory=SessionsConfig)

    @property
    def claude_path(self) -> Path:
        """Get expanded Claude data directory."""
        return Path(self.sessions.claude_dir).expanduser()
