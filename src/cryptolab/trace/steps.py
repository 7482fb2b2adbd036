"""
Trace Recorder

An append-only, ordered log of the steps a cipher performs. The front-end
renders it as the "step-by-step solution" panel.

Steps are a small tagged family instead of magic strings:
- Note(text): one line of explanation
- Separator: a visual break between phases
- Blank: an empty spacer line

Example:
    >>> trace = TraceRecorder()
    >>> trace.note("Key: 3")
    >>> trace.separator()
    >>> trace.note("Final result: KHOOR")
    >>> [type(step).__name__ for step in trace.steps]
    ['Note', 'Separator', 'Note']
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class TraceStep:
    """Base class for every trace step."""


@dataclass(frozen=True)
class Note(TraceStep):
    """A line of explanation."""
    text: str


@dataclass(frozen=True)
class Separator(TraceStep):
    """Visual break between phases of the algorithm."""


@dataclass(frozen=True)
class Blank(TraceStep):
    """Empty spacer line."""


SEPARATOR = Separator()
BLANK = Blank()


class TraceRecorder:
    """
    Collects trace steps for one cipher invocation.

    Steps can only be appended. Structured intermediate data the front-end
    draws beside the trace (a Playfair square, a rail fence, ...) is kept
    in ``artifacts``.
    """

    def __init__(self):
        self._steps: List[TraceStep] = []
        self._artifacts: Dict[str, Any] = {}

    def note(self, text: str) -> None:
        """Append a line of explanation."""
        self._steps.append(Note(text))

    def notes(self, *lines: str) -> None:
        """Append several lines in order."""
        for line in lines:
            self.note(line)

    def separator(self) -> None:
        self._steps.append(SEPARATOR)

    def blank(self) -> None:
        self._steps.append(BLANK)

    def error(self, message: str, *details: str) -> None:
        """Append an error line followed by its diagnostic lines."""
        self.note(f"ERROR: {message}")
        self.notes(*details)

    def attach(self, name: str, value: Any) -> None:
        """Keep a structured intermediate result for the caller."""
        self._artifacts[name] = value

    @property
    def steps(self) -> Tuple[TraceStep, ...]:
        """Snapshot of the steps recorded so far."""
        return tuple(self._steps)

    @property
    def artifacts(self) -> Dict[str, Any]:
        return dict(self._artifacts)

    def __len__(self) -> int:
        return len(self._steps)


def note_texts(steps) -> List[str]:
    """Text of every Note in steps, in order."""
    return [step.text for step in steps if isinstance(step, Note)]
