"""Console sink for the two terminal pipeline outcomes."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from weatherflow.errors import ErrorDescriptor, Result


def render(result: Result[object, ErrorDescriptor]) -> str:
    """Display form of the success value, or the error's description."""
    return result.match(ok=str, err=lambda e: e.describe())


def report(result: Result[object, ErrorDescriptor], *, output: TextIO | None = None) -> str:
    """Print the rendered outcome and return the printed line."""
    line = render(result)
    print(line, file=output or sys.stdout)
    return line
