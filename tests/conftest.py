"""Shared builders for dtsstub tests"""

from dtsstub.core.declaration_table import DeclarationTable
from dtsstub.core.type_nodes import (
    BuiltinKind,
    BuiltinNode,
    CallSignature,
    EnvEntry,
    ObjectKind,
    ObjectNode,
    Parameter,
    Property,
)

TARGET = "/project/target.d.ts"
LIB = ">lib.d.ts"


def obj(kind, origin=TARGET, properties=None, calls=None):
    """Build an ObjectNode from (name, node) pairs and parameter-name lists"""
    node = ObjectNode(origin=origin, kind=kind)
    for name, type_node in properties or []:
        node.properties[name] = Property(name=name, type=type_node, origin=origin)
    node.calls = [
        CallSignature(parameters=[Parameter(name=p) for p in params])
        for params in calls or []
    ]
    return node


def builtin(kind=BuiltinKind.NUMBER, origin=TARGET):
    return BuiltinNode(origin=origin, kind=kind)


def table(modules=None, env=None):
    return DeclarationTable(
        modules={name: EnvEntry(object=node) for name, node in (modules or {}).items()},
        env={name: EnvEntry(object=node) for name, node in (env or {}).items()},
    )
