"""Core model for dtsstub

Modules:
- type_nodes: TypeNode variants, properties, call signatures
- classifier: Pure predicates over type nodes
- declaration_table: Root symbol table and its builder
- guard: Cycle / top-level recursion guard
- stub_logger: Emit/skip decision logging
- config: Stub generation settings
"""

from dtsstub.core.type_nodes import (
    BuiltinKind, BuiltinNode, CallSignature, EnumNode, EnvEntry, NodeVariant,
    ObjectKind, ObjectNode, Parameter, Property, ReferenceNode, TypeNode,
    TypeParamNode, UnknownNode,
)
from dtsstub.core.classifier import TypeNodeClassifier
from dtsstub.core.declaration_table import DeclarationTable, DeclarationTableBuilder
from dtsstub.core.guard import TopLevelGuard

__all__ = [
    'BuiltinKind',
    'BuiltinNode',
    'CallSignature',
    'EnumNode',
    'EnvEntry',
    'NodeVariant',
    'ObjectKind',
    'ObjectNode',
    'Parameter',
    'Property',
    'ReferenceNode',
    'TypeNode',
    'TypeParamNode',
    'UnknownNode',
    'TypeNodeClassifier',
    'DeclarationTable',
    'DeclarationTableBuilder',
    'TopLevelGuard',
]
