"""Compile a Mermaid state diagram into a state registry.

The compiler is permissive: it scans the diagram line by line and recognises a
small set of line shapes, in priority order:

1. ``[*] --> Name``               initial transition
2. ``Source --> Target : Event``  transition (the label is optional)
3. ``Name --> [*]``               final transition
4. ``state "Label" as Name``      state declaration (or ``state Name``)

The first matching rule wins. Anything else (blank lines, ``%%`` comments,
the ``stateDiagram-v2`` header, unsupported syntax) is ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from .descriptor import DEFAULT_INITIAL_STATE, CompiledDiagram, StateNode, StateType

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "%"


class _StateRegistry:
    """Mutable state registry owned by a single compile call."""

    def __init__(self) -> None:
        # Insertion order matters: the first registered state is the fallback initial state.
        self._transitions: dict[str, dict[str, str]] = {}
        self._final: set[str] = set()
        self.initial: str | None = None

    def ensure(self, name: str) -> dict[str, str]:
        return self._transitions.setdefault(name, {})

    def add_transition(self, source: str, target: str, event: str) -> None:
        transitions = self.ensure(source)
        self.ensure(target)
        transitions[event] = target

    def mark_final(self, name: str) -> None:
        self.ensure(name)
        self._final.add(name)

    def freeze(self) -> CompiledDiagram:
        states = {
            name: StateNode(
                on=dict(on),
                type=StateType.FINAL if name in self._final else None,
            )
            for name, on in self._transitions.items()
        }
        initial = self.initial or next(iter(states), DEFAULT_INITIAL_STATE)
        return CompiledDiagram(states=states, initial=initial)


def synthetic_event_name(target: str) -> str:
    """Event name used for an unlabeled transition into `target`."""

    return f"TO_{target.upper()}"


def _on_initial(registry: _StateRegistry, match: re.Match[str]) -> None:
    name = match.group(1)
    registry.initial = name
    registry.ensure(name)


def _on_transition(registry: _StateRegistry, match: re.Match[str]) -> None:
    source, target, label = match.group(1), match.group(2), match.group(3)
    event = (label or "").strip() or synthetic_event_name(target)
    registry.add_transition(source, target, event)


def _on_final(registry: _StateRegistry, match: re.Match[str]) -> None:
    registry.mark_final(match.group(1))


def _on_declaration(registry: _StateRegistry, match: re.Match[str]) -> None:
    # The display label (group 1) is not modelled.
    registry.ensure(match.group(2))


LineHandler = Callable[[_StateRegistry, re.Match[str]], None]

_ARROW = "-->"

# Identifiers are ASCII word characters. Names never start mid-word and never
# give characters back, so a long line without an arrow is scanned in linear time.
_LINE_RULES: tuple[tuple[str, re.Pattern[str], LineHandler], ...] = (
    (_ARROW, re.compile(r"\[\*\]\s*-->\s*(\w+)", re.ASCII), _on_initial),
    (
        _ARROW,
        re.compile(r"(?<!\w)(\w++)\s*-->\s*(\w+)(?:\s*:\s*(.+))?", re.ASCII),
        _on_transition,
    ),
    (_ARROW, re.compile(r"(?<!\w)(\w++)\s*-->\s*\[\*\]", re.ASCII), _on_final),
    (
        "state",
        re.compile(r'state\s++(?:"([^"]++)"\s++as\s++)?(\w+)', re.ASCII),
        _on_declaration,
    ),
)


def compile_state_diagram(text: str) -> CompiledDiagram:
    """Compile Mermaid state diagram text into a state registry and initial state.

    The initial state is the target of the last ``[*] --> Name`` line, else the
    first state encountered, else ``"idle"`` for an empty diagram.
    """

    registry = _StateRegistry()

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        for marker, pattern, handler in _LINE_RULES:
            if marker not in stripped:
                continue
            match = pattern.search(stripped)
            if match is not None:
                handler(registry, match)
                break

    compiled = registry.freeze()
    logger.debug(
        "Compiled state diagram",
        extra={"state_count": len(compiled.states), "initial": compiled.initial},
    )
    return compiled
