"""Type node classifier for dtsstub

Pure predicates answering which variant a type node is, which kind an
object node has, and whether a node was declared by a given source.
"""

from typing import Optional, Union

from dtsstub.core.type_nodes import (
    BuiltinNode,
    EnumNode,
    NodeVariant,
    ObjectKind,
    ObjectNode,
    Property,
    ReferenceNode,
    TypeNode,
    TypeParamNode,
)


class TypeNodeClassifier:
    """Classifies type nodes for stub emission"""

    @staticmethod
    def variant_of(node: TypeNode) -> NodeVariant:
        """Get the variant tag of a node

        Args:
            node: Type node

        Returns:
            NodeVariant (UNKNOWN for nodes outside the modelled set)
        """
        if isinstance(node, TypeNode):
            return node.variant
        return NodeVariant.UNKNOWN

    @staticmethod
    def is_builtin(node: TypeNode) -> bool:
        return isinstance(node, BuiltinNode)

    @staticmethod
    def is_reference(node: TypeNode) -> bool:
        return isinstance(node, ReferenceNode)

    @staticmethod
    def is_object(node: TypeNode) -> bool:
        return isinstance(node, ObjectNode)

    @staticmethod
    def is_enum(node: TypeNode) -> bool:
        return isinstance(node, EnumNode)

    @staticmethod
    def is_type_param(node: TypeNode) -> bool:
        return isinstance(node, TypeParamNode)

    @staticmethod
    def is_kind(kind: ObjectKind, node: TypeNode) -> bool:
        """Check if node is an object node of the given kind"""
        return isinstance(node, ObjectNode) and node.kind is kind

    @classmethod
    def is_module(cls, node: TypeNode) -> bool:
        return cls.is_kind(ObjectKind.MODULE, node)

    @classmethod
    def is_interface(cls, node: TypeNode) -> bool:
        return cls.is_kind(ObjectKind.INTERFACE, node)

    @classmethod
    def is_class(cls, node: TypeNode) -> bool:
        return cls.is_kind(ObjectKind.CLASS, node)

    @classmethod
    def is_function(cls, node: TypeNode) -> bool:
        """Check if node stands for a function type

        An interface with at least one call signature is treated as a
        callable contract. Modules never qualify, even with call signatures.

        Args:
            node: Type node

        Returns:
            True if node should be stubbed as a function
        """
        return cls.is_interface(node) and len(node.calls) > 0

    @staticmethod
    def is_from_origin(origin: Optional[str], item: Union[TypeNode, Property]) -> bool:
        """Check if a node or property was declared by the given source

        Args:
            origin: Identifier of the source under processing
            item: Type node or property

        Returns:
            True if item's origin equals origin
        """
        return item.origin == origin
