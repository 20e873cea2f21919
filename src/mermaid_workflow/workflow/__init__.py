"""Mermaid state diagram to workflow descriptor pipeline.

Markdown -> extractor -> compiler -> workflow descriptor.

Every step is a pure function over its input; nothing is cached or shared
between calls.
"""

from mermaid_workflow.workflow.builder import (
    create_workflow_from_markdown,
    load_workflow,
    looks_like_state_diagram,
)
from mermaid_workflow.workflow.compiler import compile_state_diagram
from mermaid_workflow.workflow.composition import ComposedWorkflow, compose_workflows
from mermaid_workflow.workflow.descriptor import (
    CompiledDiagram,
    StateNode,
    StateType,
    WorkflowDescriptor,
    default_workflow,
)
from mermaid_workflow.workflow.extractor import extract_mermaid_diagram

__all__ = [
    "CompiledDiagram",
    "ComposedWorkflow",
    "StateNode",
    "StateType",
    "WorkflowDescriptor",
    "compile_state_diagram",
    "compose_workflows",
    "create_workflow_from_markdown",
    "default_workflow",
    "extract_mermaid_diagram",
    "load_workflow",
    "looks_like_state_diagram",
]
