"""Stage composition via flat_map.

A pipeline is an ordered tuple of fallible stages. Running it seeds `Ok(value)`
and binds each stage in turn, so the first Err short-circuits the rest and
reaches the caller unchanged.

    pipeline = Pipeline() >> parse >> validate
    pipeline.map(str.upper)(raw)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import reduce
from typing import Generic, TypeVar

from weatherflow.errors import Ok, Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

# Stage: value -> Result of the next value
Stage = Callable[[object], Result[object, object]]


def lift(f: Callable[[T], U]) -> Callable[[T], Result[U, E]]:
    """Turn a total function into a stage that always succeeds."""
    def stage(value: T) -> Result[U, E]:
        return Ok(f(value))
    stage.__name__ = getattr(f, "__name__", "lifted")
    return stage


@dataclass(frozen=True, slots=True)
class Pipeline(Generic[T, U, E]):
    """Immutable chain of stages. Every builder method returns a new pipeline."""

    stages: tuple[Stage, ...] = field(default=())

    def then(self, stage: Callable[..., Result[object, E]]) -> Pipeline[T, object, E]:
        """Append a fallible (flat_map) stage."""
        return Pipeline((*self.stages, stage))

    __rshift__ = then

    def map(self, f: Callable[..., object]) -> Pipeline[T, object, E]:
        """Append a total (map) stage."""
        return Pipeline((*self.stages, lift(f)))

    def run(self, value: T) -> Result[U, E]:
        """Run all stages on value, halting at the first Err."""
        return reduce(lambda acc, stage: acc.flat_map(stage), self.stages, Ok(value))  # type: ignore[return-value]

    __call__ = run

    def __len__(self) -> int:
        return len(self.stages)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(getattr(s, "__name__", repr(s)) for s in self.stages)
