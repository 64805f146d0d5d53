"""Shared test helpers for building JSONL log trees."""

import json
from pathlib import Path


def assistant_line(
    msg_id: str = "msg_001",
    timestamp: str = "2026-02-14T10:00:00.000Z",
    model: str = "claude-opus-4-6",
    input_tokens: int = 100,
    output_tokens: int = 50,
    cache_creation: int = 0,
    cache_read: int = 0,
    cwd: str = "/home/user/proj",
) -> dict:
    """Build a raw assistant log entry."""
    return {
        "type": "assistant",
        "timestamp": timestamp,
        "cwd": cwd,
        "message": {
            "id": msg_id,
            "model": model,
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "cache_creation_input_tokens": cache_creation,
                "cache_read_input_tokens": cache_read,
            },
        },
    }


def user_line(timestamp: str = "2026-02-14T10:01:00.000Z", cwd: str = "/home/user/proj") -> dict:
    return {
        "type": "user",
        "timestamp": timestamp,
        "cwd": cwd,
        "message": {"role": "user", "content": "hello"},
    }


def write_jsonl(path: Path, lines: list) -> Path:
    """Write dicts (serialized) or raw strings as JSONL lines."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = "\n".join(line if isinstance(line, str) else json.dumps(line) for line in lines)
    path.write_text(text + "\n")
    return path


def write_main_log(projects_dir: Path, lines: list, project_dir: str = "-home-user-proj",
                   session_id: str = "session-abc") -> Path:
    return write_jsonl(projects_dir / project_dir / f"{session_id}.jsonl", lines)


def write_subagent_log(projects_dir: Path, lines: list, project_dir: str = "-home-user-proj",
                       session_id: str = "session-abc", agent_id: str = "a123") -> Path:
    return write_jsonl(
        projects_dir / project_dir / session_id / "subagents" / f"agent-{agent_id}.jsonl",
        lines,
    )
