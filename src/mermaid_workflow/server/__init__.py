"""FastAPI server adapter for mermaid-workflow.

Design intent:
- Keep compilation logic in `mermaid_workflow.workflow.*`
- Keep server-specific concerns (routing, CORS, request schemas) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from mermaid_workflow.server.app import create_app
