"""Pydantic models for the REST server."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from mermaid_workflow.workflow.descriptor import CompiledDiagram, StateNode, WorkflowDescriptor


class MarkdownRequest(BaseModel):
    markdown: str


class DiagramRequest(BaseModel):
    diagram: str


class ApiState(BaseModel):
    on: dict[str, str] | None = None
    type: Literal["final"] | None = None

    @classmethod
    def from_node(cls, node: StateNode) -> ApiState:
        return cls.model_validate(node.to_json())


class ApiCompiledDiagram(BaseModel):
    initial: str
    states: dict[str, ApiState]

    @classmethod
    def from_compiled(cls, compiled: CompiledDiagram) -> ApiCompiledDiagram:
        return cls(
            initial=compiled.initial,
            states={name: ApiState.from_node(node) for name, node in compiled.states.items()},
        )


class ApiWorkflow(ApiCompiledDiagram):
    id: str

    @classmethod
    def from_workflow(cls, workflow: WorkflowDescriptor) -> ApiWorkflow:
        return cls(
            id=workflow.id,
            initial=workflow.initial,
            states={name: ApiState.from_node(node) for name, node in workflow.states.items()},
        )


class ApiDiagram(BaseModel):
    diagram: str | None = None
