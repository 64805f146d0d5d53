"""Derive project display names from paths."""

import re


def project_name_from_cwd(cwd: str) -> str:
    """Get the last path segment of a working directory as the project name.

    /home/wiz/AI/LLM → LLM
    C:\\Users\\wiz\\app → app
    """
    if not cwd:
        return ""
    trimmed = re.sub(r"[/\\]+$", "", cwd)
    if not trimmed:
        # Root directory
        return cwd[0]
    return re.split(r"[/\\]", trimmed)[-1]


def matches_project(project: str, query: str) -> bool:
    """Case-insensitive substring match; an empty query matches everything."""
    if not query:
        return True
    return query.lower() in project.lower()
