"""dtsstub.generators package

Generators turning declaration tables into stub statements.
"""

from .statement_formatter import StatementFormatter
from .stub_emitter import (
    StubEmitter,
    StubGenerationError,
    UnsupportedNodeError,
    UnsupportedObjectKindError,
    generate_stubs
)

__all__ = [
    "StatementFormatter",
    "StubEmitter",
    "StubGenerationError",
    "UnsupportedNodeError",
    "UnsupportedObjectKindError",
    "generate_stubs"
]
