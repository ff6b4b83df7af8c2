"""Access to Claude Code session files on disk."""

import asyncio
import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from loguru import logger


class SessionReader(Protocol):
    """Anything able to return the full text of a session file."""

    async def read_session_file(self, path: str | Path) -> str: ...


class SessionFileReader:
    """
    Reads Claude Code session transcripts.

    Directory layout:
        ~/.claude/
        └── projects/
            └── {encoded-cwd}/        # e.g. -Users-me-project
                └── {session-id}.jsonl
    """

    def __init__(self, claude_dir: Path | str = "~/.claude"):
        self.claude_dir = Path(claude_dir).expanduser()
        self.projects_dir = self.claude_dir / "projects"

    # ── public API ──────────────────────────────────────────────

    async def read_session_file(self, path: str | Path) -> str:
        """
        Read the full text of a session file.

        Args:
            path: Absolute path, or a path relative to the projects directory.

        Returns:
            The file contents.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: On any other read failure.
        """
        resolved = self.resolve(path)
        logger.debug(f"Reading session file {resolved}")
        # Undecodable bytes become U+FFFD instead of failing the whole read.
        return await asyncio.to_thread(resolved.read_text, encoding="utf-8", errors="replace")

    def resolve(self, path: str | Path) -> Path:
        """Resolve a session path, anchoring relative paths at projects_dir."""
        p = Path(path).expanduser()
        if p.is_absolute():
            return p
        return self.projects_dir / p

    @staticmethod
    def project_dir_name(cwd: str | Path) -> str:
        """Encode a working directory the way Claude names project folders."""
        return re.sub(r"[^A-Za-z0-9]", "-", str(Path(cwd).expanduser().absolute()))

    def project_dir_for(self, cwd: str | Path) -> Path:
        """Get the project folder that holds sessions started in *cwd*."""
        return self.projects_dir / self.project_dir_name(cwd)

    def list_sessions(self, cwd: str | Path | None = None) -> list[dict[str, Any]]:
        """
        List session files, optionally restricted to one project.

        Returns:
            List of session info dicts sorted by updated_at descending.
        """
        if cwd is not None:
            paths = self.project_dir_for(cwd).glob("*.jsonl")
        else:
            paths = self.projects_dir.glob("*/*.jsonl")

        sessions = []
        for path in paths:
            try:
                mtime = path.stat().st_mtime
                sessions.append({
                    "session_id": path.stem,
                    "path": str(path),
                    "project": path.parent.name,
                    "cwd": self._read_cwd(path),
                    "updated_at": datetime.fromtimestamp(mtime).isoformat(),
                })
            except OSError as e:
                logger.warning(f"Failed to inspect session {path.name}: {e}")
                continue

        return sorted(sessions, key=lambda x: x["updated_at"], reverse=True)

    def find_latest_session(self, cwd: str | Path | None = None) -> Path | None:
        """Return the most recently modified session file, if any."""
        sessions = self.list_sessions(cwd)
        if not sessions:
            return None
        return Path(sessions[0]["path"])

    # ── internal helpers ────────────────────────────────────────

    @staticmethod
    def _read_cwd(path: Path) -> str | None:
        """Find the first record carrying a cwd."""
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if not isinstance(data, dict):
                    continue
                cwd = data.get("cwd")
                if isinstance(cwd, str) and cwd:
                    return cwd
        return None
