"""map vs flat_map vs apply on a toy computation.

Halving with a plain function has to signal failure in-band (-1), and map
keeps going with the bogus value. Halving with a Result-returning function
stops at the first failure when chained with flat_map.

    >>> walkthrough(10).mapped
    Ok(-1)
    >>> walkthrough(10).flat_mapped
    Err('cannot halve 2')
"""

from __future__ import annotations

from typing import NamedTuple

from weatherflow.errors import Err, Ok, Result

SENTINEL = -1


def divide_by_two_map(value: int) -> int:
    """Halve values above 2, else SENTINEL."""
    return value // 2 if value > 2 else SENTINEL


def divide_by_two(value: int) -> Result[int, str]:
    """Halve values above 2, else Err."""
    return Ok(value // 2) if value > 2 else Err(f"cannot halve {value}")


class Walkthrough(NamedTuple):
    mapped: Result[int, str]
    flat_mapped: Result[int, str]
    applied: Result[int, str]
    chained: Result[int, str]


def walkthrough(start: int = 10) -> Walkthrough:
    """Run the same halving four ways."""
    seed: Result[int, str] = Ok(start)
    wrapped: Result[object, str] = Ok(divide_by_two_map)
    return Walkthrough(
        mapped=seed.map(divide_by_two_map).map(divide_by_two_map).map(divide_by_two_map).map(divide_by_two_map),
        flat_mapped=seed.flat_map(divide_by_two).flat_map(divide_by_two).flat_map(divide_by_two),
        applied=seed.apply(wrapped).apply(wrapped).apply(wrapped),  # type: ignore[arg-type]
        chained=seed >> divide_by_two >> divide_by_two >> divide_by_two,
    )
