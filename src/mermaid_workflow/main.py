"""CLI entrypoint for mermaid-workflow.

Reads Markdown documents and prints the workflow descriptors they describe.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from mermaid_workflow import __version__
from mermaid_workflow.config import WorkflowSettings
from mermaid_workflow.logging import configure_logging
from mermaid_workflow.workflow.builder import create_workflow_from_markdown
from mermaid_workflow.workflow.composition import compose_workflows
from mermaid_workflow.workflow.descriptor import WorkflowDescriptor
from mermaid_workflow.workflow.extractor import extract_mermaid_diagram

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def _read_document(path: str) -> str:
    if path == STDIN_PATH:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _load_workflow(path: str) -> WorkflowDescriptor:
    return create_workflow_from_markdown(_read_document(path))


def _parse_region(value: str) -> tuple[str, str]:
    name, sep, path = value.partition("=")
    name = name.strip()
    if not sep or not name or not path.strip():
        raise ValueError(f"Expected NAME=PATH, got {value!r}")
    return name, path.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mermaid-workflow",
        description="Compile Mermaid state diagrams embedded in Markdown into workflow machines",
    )
    parser.add_argument("--version", action="version", version=f"mermaid-workflow {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_cmd = subparsers.add_parser(
        "compile",
        help="Print the workflow descriptor of a Markdown document as JSON",
    )
    compile_cmd.add_argument("path", help="Markdown file to read ('-' for stdin)")
    compile_cmd.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (defaults to MERMAID_WORKFLOW_JSON_INDENT)",
    )

    extract_cmd = subparsers.add_parser(
        "extract",
        help="Print the raw Mermaid diagram embedded in a Markdown document",
    )
    extract_cmd.add_argument("path", help="Markdown file to read ('-' for stdin)")

    compose_cmd = subparsers.add_parser(
        "compose",
        help="Compose several Markdown workflows into one parallel workflow",
    )
    compose_cmd.add_argument(
        "regions",
        nargs="+",
        metavar="NAME=PATH",
        help="Region name and the Markdown file describing it",
    )
    compose_cmd.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (defaults to MERMAID_WORKFLOW_JSON_INDENT)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = WorkflowSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    indent = getattr(args, "indent", None)
    if indent is None:
        indent = settings.json_indent

    try:
        if args.command == "compile":
            workflow = _load_workflow(args.path)
            print(json.dumps(workflow.to_json(), indent=indent, ensure_ascii=False))
            return 0

        if args.command == "extract":
            diagram = extract_mermaid_diagram(_read_document(args.path))
            if diagram is None:
                logger.warning("No mermaid diagram found", extra={"path": args.path})
                print("No mermaid diagram found", file=sys.stderr)
                return 1
            print(diagram)
            return 0

        # argparse only lets compose through to here.
        try:
            regions = [_parse_region(value) for value in args.regions]
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 2

        workflows = {name: _load_workflow(path) for name, path in regions}
        composed = compose_workflows(workflows)
        logger.info("Composed workflows", extra={"regions": list(workflows)})
        print(json.dumps(composed.to_json(), indent=indent, ensure_ascii=False))
        return 0

    except OSError:
        logger.exception("Could not read input document")
        return 1

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
