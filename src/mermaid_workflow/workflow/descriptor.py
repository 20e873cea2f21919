from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

WORKFLOW_ID = "workflow"
DEFAULT_INITIAL_STATE = "idle"


class StateType(str, Enum):
    FINAL = "final"


@dataclass(frozen=True, slots=True)
class StateNode:
    """A single state of a workflow: its outgoing transitions and terminal marker.

    Initial-ness is not stored here; it lives on the descriptor.
    """

    on: dict[str, str] = field(default_factory=dict)
    type: StateType | None = None

    @property
    def is_final(self) -> bool:
        return self.type is StateType.FINAL

    def to_json(self) -> dict[str, object]:
        # A terminal state with no way out renders as just {"type": "final"}.
        out: dict[str, object] = {}
        if self.on or self.type is None:
            out["on"] = dict(self.on)
        if self.type is not None:
            out["type"] = self.type.value
        return out


@dataclass(frozen=True, slots=True)
class CompiledDiagram:
    """Result of compiling one state diagram: the state registry and its initial state."""

    states: dict[str, StateNode]
    initial: str


@dataclass(frozen=True, slots=True)
class WorkflowDescriptor:
    """A finite-state-machine description consumable by a state-machine runtime."""

    initial: str
    states: dict[str, StateNode]
    id: str = WORKFLOW_ID

    def to_json(self) -> dict[str, object]:
        return {
            "id": self.id,
            "initial": self.initial,
            "states": {name: node.to_json() for name, node in self.states.items()},
        }


def default_workflow() -> WorkflowDescriptor:
    """The fixed four-state machine used when a document describes no workflow."""

    return WorkflowDescriptor(
        initial=DEFAULT_INITIAL_STATE,
        states={
            "idle": StateNode(on={"ORDER_RECEIVED": "processing"}),
            "processing": StateNode(on={"COMPLETED": "completed", "FAILED": "failed"}),
            "completed": StateNode(type=StateType.FINAL),
            "failed": StateNode(type=StateType.FINAL),
        },
    )
