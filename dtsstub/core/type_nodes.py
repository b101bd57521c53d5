"""Type node model for dtsstub

Defines the closed set of type node variants produced by the declaration
front end, plus the property, call signature and environment entry records
that hang off them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class BuiltinKind(Enum):
    """Primitive types known to the front end"""
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    VOID = "void"
    ANY = "any"


class ObjectKind(Enum):
    """Kinds of object-typed declarations"""
    MODULE = "module"
    INTERFACE = "interface"
    CLASS = "class"
    UNKNOWN = "unknown"  # anything else the front end emits


class NodeVariant(Enum):
    """Variant tag of a type node"""
    BUILTIN = "builtin"
    REFERENCE = "reference"
    OBJECT = "object"
    ENUM = "enum"
    TYPE_PARAM = "type-param"
    UNKNOWN = "unknown"


@dataclass(eq=False)
class TypeNode:
    """Base class for all type nodes

    Attributes:
        origin: Identifier of the declaration source that declared this node
    """
    origin: Optional[str] = None

    variant = NodeVariant.UNKNOWN

    def describe(self) -> Dict[str, Any]:
        """Shallow, cycle-free rendering of the node for diagnostics"""
        return {"type": self.variant.value, "origin": self.origin}


@dataclass(eq=False)
class BuiltinNode(TypeNode):
    """number, string, boolean, void or any"""
    kind: BuiltinKind = BuiltinKind.ANY

    variant = NodeVariant.BUILTIN

    def describe(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "origin": self.origin}


@dataclass(eq=False)
class ReferenceNode(TypeNode):
    """Alias to a type declared elsewhere; never expanded"""
    name: Optional[str] = None

    variant = NodeVariant.REFERENCE

    def describe(self) -> Dict[str, Any]:
        info = super().describe()
        info["name"] = self.name
        return info


@dataclass(eq=False)
class EnumNode(TypeNode):
    variant = NodeVariant.ENUM


@dataclass(eq=False)
class TypeParamNode(TypeNode):
    """Generic type parameter"""
    name: Optional[str] = None

    variant = NodeVariant.TYPE_PARAM

    def describe(self) -> Dict[str, Any]:
        info = super().describe()
        info["name"] = self.name
        return info


@dataclass
class Parameter:
    """Formal parameter of a call signature"""
    name: str


@dataclass
class CallSignature:
    """One overload of a callable object"""
    parameters: List[Parameter] = field(default_factory=list)

    def parameter_names(self) -> List[str]:
        return [p.name for p in self.parameters]


@dataclass(eq=False)
class Property:
    """Named member of an object node

    Attributes:
        name: Member name
        type: Type node of the member
        origin: Identifier of the declaration source that declared the member
    """
    name: str
    type: TypeNode
    origin: Optional[str] = None


@dataclass(eq=False)
class ObjectNode(TypeNode):
    """Module, interface or class

    Attributes:
        kind: Object kind
        properties: Members in declaration order
        calls: Call signatures, in declaration order
        raw_kind: Kind string as supplied by the front end
    """
    kind: ObjectKind = ObjectKind.UNKNOWN
    properties: Dict[str, Property] = field(default_factory=dict)
    calls: List[CallSignature] = field(default_factory=list)
    raw_kind: Optional[str] = None

    variant = NodeVariant.OBJECT

    def __post_init__(self) -> None:
        if self.raw_kind is None:
            self.raw_kind = self.kind.value

    def describe(self) -> Dict[str, Any]:
        return {
            "type": self.variant.value,
            "kind": self.raw_kind,
            "origin": self.origin,
            "properties": list(self.properties),
            "calls": len(self.calls),
        }


@dataclass(eq=False)
class UnknownNode(TypeNode):
    """Node whose variant the front end named but dtsstub does not model"""
    type_name: str = ""

    def describe(self) -> Dict[str, Any]:
        return {"type": self.type_name, "origin": self.origin}


@dataclass(eq=False)
class EnvEntry:
    """Entry of the front end's flat symbol environment"""
    object: TypeNode
