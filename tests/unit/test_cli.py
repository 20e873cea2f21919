"""Unit tests for the mermaid-workflow CLI."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from mermaid_workflow import __version__
from mermaid_workflow.main import build_parser, main
from mermaid_workflow.workflow.builder import create_workflow_from_markdown
from mermaid_workflow.workflow.descriptor import default_workflow


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_compile_prints_descriptor_json(
    clean_env: Path, order_markdown: str, capsys: pytest.CaptureFixture[str]
) -> None:
    doc = _write(clean_env / "docs" / "order.md", order_markdown)

    assert main(["compile", str(doc)]) == 0

    out = capsys.readouterr().out
    assert json.loads(out) == create_workflow_from_markdown(order_markdown).to_json()
    assert '\n  "id": "workflow"' in out


def test_compile_honours_indent_override(
    clean_env: Path, plain_markdown: str, capsys: pytest.CaptureFixture[str]
) -> None:
    doc = _write(clean_env / "plain.md", plain_markdown)

    assert main(["compile", str(doc), "--indent", "4"]) == 0

    out = capsys.readouterr().out
    assert json.loads(out) == default_workflow().to_json()
    assert '\n    "id": "workflow"' in out


def test_compile_reads_stdin(
    clean_env: Path,
    order_markdown: str,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(order_markdown))

    assert main(["compile", "-"]) == 0
    assert json.loads(capsys.readouterr().out)["initial"] == "Idle"


def test_compile_missing_file_fails(clean_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["compile", str(clean_env / "missing.md")]) == 1
    assert capsys.readouterr().out == ""


def test_extract_prints_diagram(
    clean_env: Path,
    order_markdown: str,
    order_diagram: str,
    capsys: pytest.CaptureFixture[str],
) -> None:
    doc = _write(clean_env / "order.md", order_markdown)

    assert main(["extract", str(doc)]) == 0
    assert capsys.readouterr().out == order_diagram + "\n"


def test_extract_without_diagram_exits_one(
    clean_env: Path, plain_markdown: str, capsys: pytest.CaptureFixture[str]
) -> None:
    doc = _write(clean_env / "plain.md", plain_markdown)

    assert main(["extract", str(doc)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No mermaid diagram found" in captured.err


def test_compose_prints_parallel_workflow(
    clean_env: Path,
    order_markdown: str,
    plain_markdown: str,
    capsys: pytest.CaptureFixture[str],
) -> None:
    orders = _write(clean_env / "orders.md", order_markdown)
    billing = _write(clean_env / "billing.md", plain_markdown)

    assert main(["compose", f"orders={orders}", f"billing={billing}"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["id"] == "composedWorkflow"
    assert payload["type"] == "parallel"
    assert list(payload["states"]) == ["orders", "billing"]
    assert payload["states"]["orders"]["initial"] == "Idle"
    assert payload["states"]["billing"] == default_workflow().to_json()


def test_compose_rejects_malformed_region(
    clean_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["compose", "no-equals-sign"]) == 2
    assert "NAME=PATH" in capsys.readouterr().err


def test_configuration_error_exits_two(
    clean_env: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("MERMAID_WORKFLOW_JSON_INDENT", "not-a-number")

    assert main(["compile", "-"]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_rejects_unknown_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["render", "doc.md"])


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_extract_reads_stdin(
    clean_env: Path,
    order_markdown: str,
    order_diagram: str,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(order_markdown))

    assert main(["extract", "-"]) == 0
    assert capsys.readouterr().out == order_diagram + "\n"
