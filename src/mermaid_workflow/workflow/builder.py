"""Build workflow descriptors from Markdown documents.

Documents that carry no Mermaid state diagram still produce a usable machine:
they fall back to :func:`default_workflow`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .compiler import compile_state_diagram
from .descriptor import WORKFLOW_ID, WorkflowDescriptor, default_workflow
from .extractor import extract_mermaid_diagram

logger = logging.getLogger(__name__)

STATE_DIAGRAM_KEYWORD = "stateDiagram"

_INITIAL_MARKER_RE = re.compile(r"\[\*\]\s*-->")


def looks_like_state_diagram(text: str) -> bool:
    """Cheap content check; this is not a parse."""

    return STATE_DIAGRAM_KEYWORD in text or _INITIAL_MARKER_RE.search(text) is not None


def create_workflow_from_markdown(markdown: str) -> WorkflowDescriptor:
    """Create a workflow descriptor from a Markdown document.

    Returns the default workflow when the document has no Mermaid block or the
    block does not look like a state diagram.
    """

    diagram = extract_mermaid_diagram(markdown)
    if diagram is None:
        logger.info("No mermaid diagram found; using default workflow")
        return default_workflow()

    if not looks_like_state_diagram(diagram):
        logger.info(
            "Mermaid diagram is not a state diagram; using default workflow",
            extra={"diagram_length": len(diagram)},
        )
        return default_workflow()

    compiled = compile_state_diagram(diagram)
    workflow = WorkflowDescriptor(id=WORKFLOW_ID, initial=compiled.initial, states=compiled.states)
    logger.debug("Built workflow", extra={"workflow": workflow})
    return workflow


def load_workflow(path: Path) -> WorkflowDescriptor:
    """Read a Markdown file and build its workflow descriptor."""

    return create_workflow_from_markdown(path.read_text(encoding="utf-8"))
