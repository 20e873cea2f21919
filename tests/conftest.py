"""Test configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from mermaid_workflow.logging import JsonFormatter

ORDER_DIAGRAM = """\
stateDiagram-v2
    [*] --> Idle
    Idle --> Processing: START
    Processing --> Completed: FINISH
    Processing --> Failed: ERROR
    Completed --> [*]
    Failed --> [*]"""


@pytest.fixture
def order_diagram() -> str:
    """Provide the canonical order-processing state diagram."""
    return ORDER_DIAGRAM


@pytest.fixture
def order_markdown(order_diagram: str) -> str:
    """Provide a Markdown document embedding the order-processing diagram."""
    return (
        "# Order Processing Workflow\n"
        "\n"
        "This document describes the order lifecycle.\n"
        "\n"
        "```mermaid\n"
        f"{order_diagram}\n"
        "```\n"
        "\n"
        "Some more text after the diagram.\n"
    )


@pytest.fixture
def plain_markdown() -> str:
    """Provide a Markdown document without any diagram."""
    return "# Order Processing Workflow\n\nThis is a workflow without a Mermaid diagram.\n"


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no settings leaking in from the environment."""
    for name in ("LOG_LEVEL", "MERMAID_WORKFLOW_JSON_INDENT", "MERMAID_WORKFLOW_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_json_logging() -> Iterator[None]:
    """Drop handlers installed by `configure_logging` so tests don't leak them."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
