from __future__ import annotations
from pathlib import Path


def prompt_confirm(question: str) -> bool:
    """Ask a y/n question; only an exact "y" counts as yes."""
    ans = input(f"{question} (y/n) ").strip()
    return ans == "y"


def strip_quotes(s: str) -> str:
    s = s.strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        return s[1:-1]
    return s


def normalize_output_path(user_input: str, default_filename: str) -> Path:
    cleaned = strip_quotes(user_input)
    p = Path(cleaned)
    if p.exists() and p.is_dir():
        return p / default_filename
    if cleaned.endswith(("/", "\\")):
        return Path(cleaned) / default_filename
    return p
