"""Tests for session file access."""

import json
import os

import pytest

from sessionbrief.session.reader import SessionFileReader


def _write_session(directory, session_id, cwd, mtime):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{session_id}.jsonl"
    lines = [
        json.dumps({"type": "summary", "summary": "x"}),
        json.dumps({"sessionId": session_id, "cwd": cwd, "timestamp": "2025-08-27T00:00:00Z"}),
    ]
    path.write_text("\n".join(lines) + "\n")
    os.utime(path, (mtime, mtime))
    return path


class TestProjectDir:
    def test_encodes_non_alphanumerics(self):
        assert SessionFileReader.project_dir_name("/Users/me/my_project.v2") == "-Users-me-my-project-v2"

    def test_project_dir_for(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        assert reader.project_dir_for("/a/b") == tmp_path / "projects" / "-a-b"


class TestReadSessionFile:
    @pytest.mark.asyncio
    async def test_reads_absolute_path(self, tmp_path):
        path = tmp_path / "s.jsonl"
        path.write_text("hello\n", encoding="utf-8")
        reader = SessionFileReader(tmp_path / "claude")
        assert await reader.read_session_file(path) == "hello\n"

    @pytest.mark.asyncio
    async def test_relative_path_uses_projects_dir(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        target = tmp_path / "projects" / "-p" / "abc.jsonl"
        target.parent.mkdir(parents=True)
        target.write_text("data")
        assert await reader.read_session_file("-p/abc.jsonl") == "data"

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_replaced(self, tmp_path):
        path = tmp_path / "s.jsonl"
        path.write_bytes(b"ok\n\xff\xfe\n")
        reader = SessionFileReader(tmp_path)
        text = await reader.read_session_file(path)
        assert text.startswith("ok\n")
        assert "\ufffd" in text

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        with pytest.raises(FileNotFoundError):
            await reader.read_session_file(tmp_path / "nope.jsonl")


class TestListSessions:
    def test_sorted_newest_first(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        project = reader.project_dir_for("/work/app")
        _write_session(project, "old", "/work/app", 1_700_000_000)
        _write_session(project, "new", "/work/app", 1_700_100_000)

        sessions = reader.list_sessions("/work/app")
        assert [s["session_id"] for s in sessions] == ["new", "old"]
        assert sessions[0]["cwd"] == "/work/app"
        assert sessions[0]["project"] == "-work-app"

    def test_filters_by_project(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        _write_session(reader.project_dir_for("/a"), "s1", "/a", 1_700_000_000)
        _write_session(reader.project_dir_for("/b"), "s2", "/b", 1_700_000_001)

        assert [s["session_id"] for s in reader.list_sessions("/a")] == ["s1"]
        assert {s["session_id"] for s in reader.list_sessions()} == {"s1", "s2"}

    def test_no_projects_dir(self, tmp_path):
        reader = SessionFileReader(tmp_path / "missing")
        assert reader.list_sessions() == []
        assert reader.find_latest_session() is None

    def test_find_latest_session(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        project = reader.project_dir_for("/work/app")
        _write_session(project, "old", "/work/app", 1_700_000_000)
        latest = _write_session(project, "new", "/work/app", 1_700_100_000)
        assert reader.find_latest_session("/work/app") == latest

    def test_undecodable_file_does_not_abort_listing(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        project = reader.project_dir_for("/a")
        _write_session(project, "good", "/a", 1_700_000_000)
        (project / "bad.jsonl").write_bytes(b"\xff\xfe\n")

        sessions = reader.list_sessions("/a")
        assert {s["session_id"] for s in sessions} == {"good", "bad"}
        assert next(s for s in sessions if s["session_id"] == "bad")["cwd"] is None

    def test_non_string_cwd_is_ignored(self, tmp_path):
        reader = SessionFileReader(tmp_path)
        project = reader.project_dir_for("/a")
        project.mkdir(parents=True)
        (project / "odd.jsonl").write_text(
            json.dumps({"cwd": 5}) + "\n" + json.dumps({"cwd": "/a"}) + "\n"
        )
        assert reader.list_sessions("/a")[0]["cwd"] == "/a"
