# app/parser.py
"""
Outline parser: turns loosely structured text (headings, bullets, notes, prose)
into a deck dict of the form {"title": str | None, "slides": [...]}.

Recognised line kinds, checked in this order after trimming:
  "# Title"      deck title, never a slide
  "## Heading"   starts a new slide
  "- item"       bullet ("-", "*" or "•" followed by whitespace)
  "Notes: text"  speaker notes ("Note:" / "Notes:", any case)
  anything else  prose, split into one bullet per sentence
"""
import re
from typing import Any, Dict, List, Optional, Tuple

from .config import DEFAULT_SLIDE_TITLE

_TITLE_RE = re.compile(r"^# ")
_SECTION_RE = re.compile(r"^##(?: |$)")
_BULLET_RE = re.compile(r"^(?:-|\*|•)\s+")
_NOTE_RE = re.compile(r"^notes?:\s*", re.IGNORECASE)
_SENTENCE_BREAK_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")


def _normalize_newlines(s: str) -> str:
    return re.sub(r"\r\n?", "\n", s or "")


def is_title_heading(line: str) -> bool:
    return bool(_TITLE_RE.match(line))


def is_section_heading(line: str) -> bool:
    return bool(_SECTION_RE.match(line))


def is_bullet(line: str) -> bool:
    return bool(_BULLET_RE.match(line))


def is_note(line: str) -> bool:
    return bool(_NOTE_RE.match(line))


def split_sentences(line: str) -> List[str]:
    """
    Split prose after ".", "!" or "?" when whitespace and then an uppercase
    letter or digit follow. "foo.bar" and "e.g. this" stay whole.
    """
    parts = _SENTENCE_BREAK_RE.split(line)
    return [p.strip() for p in parts if p.strip()]


def classify_line(line: str) -> Tuple[str, Any]:
    """Return (kind, payload) for a single trimmed, non-empty line."""
    if is_title_heading(line):
        return "title", _TITLE_RE.sub("", line, count=1).strip()
    if is_section_heading(line):
        return "section", _SECTION_RE.sub("", line, count=1).strip()
    if is_bullet(line):
        return "bullet", _BULLET_RE.sub("", line, count=1)
    if is_note(line):
        return "note", _NOTE_RE.sub("", line, count=1)
    return "prose", split_sentences(line)


def parse_outline(raw: str, default_title: str = DEFAULT_SLIDE_TITLE) -> Dict[str, Any]:
    deck_title: Optional[str] = None
    slides: List[Dict[str, Any]] = []
    current: Optional[Dict[str, Any]] = None

    def flush():
        nonlocal current
        if current is not None:
            slides.append(current)
        current = None

    for raw_line in _normalize_newlines(raw).strip().split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        kind, value = classify_line(line)
        if kind == "title":
            deck_title = value
            continue
        if kind == "section":
            flush()
            current = {"title": value, "bullets": []}
            continue

        if current is None:
            current = {"title": default_title, "bullets": []}

        if kind == "bullet":
            current["bullets"].append(value)
        elif kind == "note":
            # join only onto non-empty notes
            prev = current.get("notes")
            current["notes"] = f"{prev}\n{value}" if prev else value
        else:
            current["bullets"].extend(value)

    flush()

    return {"title": deck_title, "slides": slides}
