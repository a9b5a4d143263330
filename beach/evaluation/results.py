"""Outcomes of evaluating statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from beach.nodes import Value


class EvaluationError(RuntimeError):
    """Raised when a program cannot be evaluated."""


@dataclass(frozen=True)
class Returned:
    """A statement executed a return; ``value`` is ``None`` for a void return."""

    value: Optional[Value] = None


NodeResult = Union[Returned, None]


def is_return(result: NodeResult) -> bool:
    """Tell whether a statement result stops the enclosing block."""
    return isinstance(result, Returned)