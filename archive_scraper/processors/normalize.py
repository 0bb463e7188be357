from __future__ import annotations

import re
from typing import Optional

from bs4 import Tag

_whitespace_re = re.compile(r"\s+")
_control_chars_re = re.compile(r"[\u0000-\u0008\u000B\u000C\u000E-\u001F\u007F]")


def normalize_plain_text(text: str | None) -> str:
    """Normalize text pulled out of listing markup.

    - Strip BOM and control characters
    - Collapse whitespace (including newlines from nested tags)
    - Trim
    """
    if not text:
        return ""

    if text.startswith("\ufeff"):
        text = text.lstrip("\ufeff")
    text = _control_chars_re.sub(" ", text)
    return _whitespace_re.sub(" ", text).strip()


def node_text(node: Optional[Tag]) -> str:
    """Return the normalized text content of ``node`` or ``""`` when absent."""
    if node is None:
        return ""
    return normalize_plain_text(node.get_text())


def node_attr(node: Optional[Tag], name: str) -> str:
    """Return a stripped attribute value of ``node`` or ``""`` when absent."""
    if node is None:
        return ""
    value = node.get(name)
    if isinstance(value, list):
        # BeautifulSoup returns multi-valued attributes (e.g. class) as lists
        value = " ".join(value)
    return (value or "").strip()
