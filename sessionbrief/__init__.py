"""sessionbrief - conversation context extraction for Claude Code transcripts."""

from loguru import logger

__version__ = "0.1.0"
__logo__ = "📜"

# Library code stays quiet until an application (e.g. the CLI) opts in.
logger.disable("sessionbrief")
