from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .descriptor import WorkflowDescriptor

COMPOSED_WORKFLOW_ID = "composedWorkflow"


@dataclass(frozen=True, slots=True)
class ComposedWorkflow:
    """Several workflows running side by side as regions of one parallel machine."""

    states: dict[str, WorkflowDescriptor]
    id: str = COMPOSED_WORKFLOW_ID
    type: str = "parallel"

    def to_json(self) -> dict[str, object]:
        return {
            "id": self.id,
            "type": self.type,
            "states": {name: workflow.to_json() for name, workflow in self.states.items()},
        }


def compose_workflows(workflows: Mapping[str, WorkflowDescriptor]) -> ComposedWorkflow:
    """Compose workflows into a single parallel workflow, one region per entry."""

    return ComposedWorkflow(states=dict(workflows))
