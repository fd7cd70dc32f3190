"""Result container for success/failure values.

Implements a discriminated union for success/failure with monadic operations:
- Functor: map
- Applicative: apply
- Monad: flat_map (bind), flatten (join)
- Railway-oriented composition via `>>`

An Err is never transformed in value and never turned back into an Ok:
every combinator only re-wraps it under the new success type.

Performance notes:
- Uses __slots__ for minimal memory footprint
- Direct attribute access (no method calls) in hot paths
- sequence/traverse bail out on the first Err
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")

# Sentinel for faster Ok/Err construction
_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok(42).map(lambda x: x * 2).ok()
        84
        >>> Err("fail").map(lambda x: x * 2).err()
        'fail'
        >>> Ok(5).flat_map(lambda x: Ok(x * 2) if x > 0 else Err("neg")).ok()
        10
    """

    __slots__ = ("_value", "_is_ok")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def ok(self) -> T | None:
        """Ok value, or None if Err. Never raises."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Err value, or None if Ok. Never raises."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]

        f must be total. Partial operations belong in flat_map.
        """
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    # ─── Monad Operations ──────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Same as `map(f).flatten()`.

        Example:
            >>> Ok("42").flat_map(lambda s: Ok(int(s))).flat_map(lambda n: Ok(n*2) if n>0 else Err("neg"))
            Ok(84)
        """
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for flat_map."""
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    __rshift__ = flat_map

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Flatten nested Result. Result[Result[T,E],E] → Result[T,E]

        Also usable unbound: `Result.flatten(nested)`.
        """
        return self._value if self._is_ok else Result(self._value, _ERR)  # type: ignore[return-value,arg-type]

    # ─── Applicative Operations ─────────────────────────────────────────

    def apply(self, f_result: Result[Callable[[T], U], E]) -> Result[U, E]:
        """Apply wrapped function to wrapped value (Applicative).

        The function container is inspected first, so its Err wins when both fail.
        """
        if not f_result._is_ok:
            return Result(f_result._value, _ERR)  # type: ignore[arg-type]
        return self.map(f_result._value)  # type: ignore[arg-type]

    # ─── Inspection ──────────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], None]) -> Result[T, E]:
        """Call f with Ok value for side effects, return self."""
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], None]) -> Result[T, E]:
        """Call f with Err value for side effects, return self."""
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Conversion ────────────────────────────────────────────────────────

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (ok_value, err_value) tuple."""
        return (self._value, None) if self._is_ok else (None, self._value)  # type: ignore[return-value]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_is_ok"):
            raise AttributeError(f"Result is immutable, cannot set {name!r}")
        object.__setattr__(self, name, value)

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[List[T], E]. Fail-fast on first Err."""
    values: list[T] = []
    for r in results:
        if not r._is_ok:
            return Result(r._value, _ERR)  # type: ignore[arg-type]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, sequence results. Fail-fast on first Err (f not called on later items)."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if not r._is_ok:
            return Result(r._value, _ERR)  # type: ignore[arg-type]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)
