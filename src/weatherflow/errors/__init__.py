"""Error handling for weatherflow.

- ErrorCode: one failure kind per validation stage
- ErrorDescriptor: opaque payload carried by Err
- Result/Ok/Err: success/failure container with railway-oriented composition
"""

from .errors import ErrorCode
from .result import Err, Ok, Result, sequence, traverse
from .types import DEFAULT_DOMAIN, ErrorDescriptor, descriptor

__all__ = [
    # Error taxonomy
    "ErrorCode",
    # Result container
    "Result", "Ok", "Err",
    # Failure payload
    "ErrorDescriptor", "descriptor", "DEFAULT_DOMAIN",
    # Collection ops
    "sequence", "traverse",
]
