"""Failure payload carried by Err results."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ErrorCode

DEFAULT_DOMAIN = "weatherflow"

# Empty dict singleton to avoid allocation on each descriptor
_EMPTY_INFO: dict[str, object] = {}


@dataclass(frozen=True, slots=True)
class ErrorDescriptor:
    """Opaque error value: domain tag, code and optional context.

    `cause` holds the underlying exception for transport and parse failures.
    It is excluded from equality so that identical inputs give equal descriptors.
    """

    code: ErrorCode
    message: str = ""
    domain: str = DEFAULT_DOMAIN
    info: dict[str, object] = field(default_factory=dict, hash=False)
    cause: BaseException | None = field(default=None, compare=False, hash=False, repr=False)

    @classmethod
    def from_exception(cls, code: ErrorCode, exc: BaseException, *, domain: str = DEFAULT_DOMAIN) -> ErrorDescriptor:
        """Wrap an exception as the cause of a failure."""
        return cls(code, str(exc) or type(exc).__name__, domain, _EMPTY_INFO, exc)

    def describe(self) -> str:
        """Format as `[domain:CODE] message (k=v, ...)`."""
        text = f"[{self.domain}:{self.code}] {self.message or self.code.summary}"
        if self.info:
            text += f" ({', '.join(f'{k}={v}' for k, v in self.info.items())})"
        return text

    __str__ = describe


def descriptor(code: ErrorCode, message: str = "", *, domain: str = DEFAULT_DOMAIN, **info: object) -> ErrorDescriptor:
    """Create ErrorDescriptor concisely."""
    return ErrorDescriptor(code, message, domain, info or _EMPTY_INFO)

