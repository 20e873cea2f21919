"""Locate the Mermaid diagram embedded in a Markdown document.

Only the first ```` ```mermaid ```` fenced block is considered. The block body
must be separated from both fences by whitespace; anything else is not a
diagram block.
"""

from __future__ import annotations

import re

_MERMAID_BLOCK_RE = re.compile(r"```mermaid\s+([\s\S]*?)\s+```")


def extract_mermaid_diagram(markdown: str) -> str | None:
    """Return the trimmed body of the first Mermaid block, or None if there is none."""

    match = _MERMAID_BLOCK_RE.search(markdown)
    if match is None or not match.group(1):
        return None
    return match.group(1).strip()
