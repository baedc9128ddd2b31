"""Prompt asset loading."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

PROMPTS_DIR = Path(__file__).parent / "prompts"


@lru_cache
def load_prompt(name: str) -> str:
    """prompts/{name}.txt 를 읽습니다."""
    filepath = PROMPTS_DIR / f"{name}.txt"
    if not filepath.exists():
        raise FileNotFoundError(f"Prompt not found: {filepath}")
    return filepath.read_text(encoding="utf-8")


__all__ = ["load_prompt"]
