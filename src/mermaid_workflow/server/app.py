"""FastAPI app factory.

Endpoints are intentionally thin wrappers over `mermaid_workflow.workflow`.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mermaid_workflow import __version__
from mermaid_workflow.server.config import ServerSettings
from mermaid_workflow.server.models import (
    ApiCompiledDiagram,
    ApiDiagram,
    ApiWorkflow,
    DiagramRequest,
    MarkdownRequest,
)
from mermaid_workflow.workflow.builder import create_workflow_from_markdown
from mermaid_workflow.workflow.compiler import compile_state_diagram
from mermaid_workflow.workflow.extractor import extract_mermaid_diagram

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = ServerSettings()

    app = FastAPI(
        title="Mermaid Workflow",
        version=__version__,
        description="Compile Mermaid state diagrams embedded in Markdown into workflow machines.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @app.post(
        "/api/workflows/compile",
        response_model=ApiWorkflow,
        response_model_exclude_none=True,
    )
    def compile_workflow(req: MarkdownRequest) -> ApiWorkflow:
        workflow = create_workflow_from_markdown(req.markdown)
        logger.info(
            "Compiled workflow",
            extra={"initial": workflow.initial, "state_count": len(workflow.states)},
        )
        return ApiWorkflow.from_workflow(workflow)

    @app.post("/api/diagrams/extract", response_model=ApiDiagram)
    def extract_diagram(req: MarkdownRequest) -> ApiDiagram:
        return ApiDiagram(diagram=extract_mermaid_diagram(req.markdown))

    @app.post(
        "/api/diagrams/compile",
        response_model=ApiCompiledDiagram,
        response_model_exclude_none=True,
    )
    def compile_diagram(req: DiagramRequest) -> ApiCompiledDiagram:
        return ApiCompiledDiagram.from_compiled(compile_state_diagram(req.diagram))

    return app
