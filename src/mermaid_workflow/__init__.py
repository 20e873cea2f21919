"""mermaid-workflow.

Turns Mermaid state diagrams embedded in Markdown into finite-state-machine
descriptors:
- a diagram extractor and a permissive line-oriented compiler
- a fixed default workflow for documents that describe none
- a CLI and a small REST adapter over the same pipeline
"""

__version__ = "0.1.0"

from mermaid_workflow.workflow import (
    WorkflowDescriptor,
    compile_state_diagram,
    create_workflow_from_markdown,
    extract_mermaid_diagram,
)

__all__ = [
    "__version__",
    "WorkflowDescriptor",
    "compile_state_diagram",
    "create_workflow_from_markdown",
    "extract_mermaid_diagram",
]
