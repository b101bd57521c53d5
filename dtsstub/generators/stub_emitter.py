"""Stub emitter for dtsstub

Walks root symbols of a declaration table and their members, producing
the ordered list of statements that define a runtime placeholder for
every declared name.

Shapes:
- module / non-callable interface: empty object
- callable interface: empty function taking the first call signature's parameters
- class: empty constructor, members attached under <scope>.prototype
- builtin / enum / type parameter: value-less declaration
"""

import json
from typing import Dict, List, Optional, Set

from dtsstub.core.classifier import TypeNodeClassifier
from dtsstub.core.declaration_table import DeclarationTable
from dtsstub.core.guard import TopLevelGuard
from dtsstub.core.stub_logger import SkipReason, StubLogger, StubShape
from dtsstub.core.type_nodes import (
    BuiltinNode,
    EnumNode,
    ObjectKind,
    ObjectNode,
    Property,
    TypeNode,
    TypeParamNode,
)
from dtsstub.generators.statement_formatter import SCOPE_SEPARATOR, StatementFormatter

PROTOTYPE = "prototype"


class StubGenerationError(NotImplementedError):
    """Declaration tree holds a shape the emitter cannot stub

    Attributes:
        scope: Scope path of the offending node
        node: The offending node
    """

    def __init__(self, message: str, scope: str, node: TypeNode) -> None:
        super().__init__(message)
        self.scope = scope
        self.node = node


class UnsupportedObjectKindError(StubGenerationError):
    """Object node kind is not module, interface or class"""


class UnsupportedNodeError(StubGenerationError):
    """Node variant is not builtin, reference, object, enum or type-param"""


def _render(node: TypeNode) -> str:
    if isinstance(node, TypeNode):
        return json.dumps(node.describe(), sort_keys=True)
    return repr(node)


class StubEmitter:
    """Emits stub statements for one declaration file

    Usage Example:
        table = DeclarationTableBuilder().build(env, origin)
        emitter = StubEmitter(table, origin)
        print("\\n".join(emitter.generate()))
    """

    def __init__(self,
                 table: DeclarationTable,
                 origin: str,
                 formatter: Optional[StatementFormatter] = None,
                 logger: Optional[StubLogger] = None) -> None:
        """Initialize stub emitter

        Args:
            table: Root symbols of the file under processing
            origin: Identifier of the file under processing
            formatter: Statement formatter (default: new StatementFormatter)
            logger: Optional logger recording emit/skip decisions
        """
        self.table = table
        self.origin = origin
        self.formatter = formatter or StatementFormatter()
        self.logger = logger
        self.guard = TopLevelGuard(table)
        # ids of object nodes on the current recursion path
        self._active: Set[int] = set()

    def generate(self) -> List[str]:
        """Emit statements for all root symbols

        Modules come first, then plain top-level names, each group in
        lexicographic order so the output is reproducible.

        Returns:
            Ordered list of statements
        """
        output: List[str] = []
        for module_name in self.table.module_names():
            output.extend(self.emit(module_name, self.table.modules[module_name].object, 0))
        for name in self.table.env_names():
            output.extend(self.emit(name, self.table.env[name].object, 0))
        return output

    def emit(self, scope: str, node: TypeNode, depth: int) -> List[str]:
        """Emit statements for node and its members

        Args:
            scope: Dotted scope path node is assigned to
            node: Type node
            depth: Recursion depth (0 for roots)

        Returns:
            Own statement (if any) followed by member statements

        Raises:
            UnsupportedObjectKindError: If an object node has an unknown kind
            UnsupportedNodeError: If node is of an unknown variant
        """
        if self.guard.should_stop(scope, node, depth):
            if self.logger:
                reason = SkipReason.REFERENCE if TypeNodeClassifier.is_reference(node) else SkipReason.TOP_LEVEL
                self.logger.log_skip(scope, reason, depth=depth)
            return []

        method_name = f"visit_{node.__class__.__name__}"
        method = getattr(self, method_name, self._generic_visit)
        return method(scope, node, depth)

    def _generic_visit(self, scope: str, node: TypeNode, depth: int) -> List[str]:
        raise UnsupportedNodeError(
            f"Node type not yet implemented at '{scope}': {_render(node)}",
            scope,
            node,
        )

    def visit_ObjectNode(self, scope: str, node: ObjectNode, depth: int) -> List[str]:
        """Emit an object, function or constructor stub plus its members"""
        if not TypeNodeClassifier.is_from_origin(self.origin, node):
            if self.logger:
                self.logger.log_skip(scope, SkipReason.FOREIGN_ORIGIN, detail=node.origin, depth=depth)
            return []

        if id(node) in self._active:
            if self.logger:
                self.logger.log_skip(scope, SkipReason.CYCLE, depth=depth)
            return []

        self._active.add(id(node))
        try:
            return self._emit_object(scope, node, depth)
        finally:
            self._active.discard(id(node))

    def _emit_object(self, scope: str, node: ObjectNode, depth: int) -> List[str]:
        output: List[str] = []
        if node.kind in (ObjectKind.MODULE, ObjectKind.INTERFACE):
            if TypeNodeClassifier.is_function(node):
                parameters = node.calls[0].parameter_names()
                output.append(self._assign(scope, StatementFormatter.function_value(parameters),
                                           StubShape.FUNCTION, depth))
            else:
                output.append(self._assign(scope, StatementFormatter.EMPTY_OBJECT,
                                           StubShape.OBJECT, depth))
            output.extend(self._emit_properties(scope, node.properties, depth))
        elif node.kind is ObjectKind.CLASS:
            output.append(self._assign(scope, StatementFormatter.EMPTY_CONSTRUCTOR,
                                       StubShape.CONSTRUCTOR, depth))
            output.extend(self._emit_properties(f"{scope}{SCOPE_SEPARATOR}{PROTOTYPE}",
                                                node.properties, depth))
        else:
            raise UnsupportedObjectKindError(
                f"Object kind '{node.raw_kind}' not yet implemented at '{scope}': {_render(node)}",
                scope,
                node,
            )
        return output

    def visit_BuiltinNode(self, scope: str, node: BuiltinNode, depth: int) -> List[str]:
        return [self._assign(scope, None, StubShape.DECLARATION, depth)]

    def visit_EnumNode(self, scope: str, node: EnumNode, depth: int) -> List[str]:
        return [self._assign(scope, None, StubShape.DECLARATION, depth)]

    def visit_TypeParamNode(self, scope: str, node: TypeParamNode, depth: int) -> List[str]:
        return [self._assign(scope, None, StubShape.DECLARATION, depth)]

    def _emit_properties(self, scope: str, properties: Dict[str, Property], depth: int) -> List[str]:
        """Emit members declared by the file under processing, in stored order"""
        output: List[str] = []
        for name, prop in properties.items():
            member_scope = f"{scope}{SCOPE_SEPARATOR}{name}"
            if not TypeNodeClassifier.is_from_origin(self.origin, prop):
                if self.logger:
                    self.logger.log_skip(member_scope, SkipReason.FOREIGN_ORIGIN,
                                         detail=prop.origin, depth=depth + 1)
                continue
            output.extend(self.emit(member_scope, prop.type, depth + 1))
        return output

    def _assign(self, scope: str, value: Optional[str], shape: StubShape, depth: int) -> str:
        if self.logger:
            self.logger.log_emit(scope, shape, depth)
        return self.formatter.format(scope, value)


def generate_stubs(table: DeclarationTable,
                   origin: str,
                   formatter: Optional[StatementFormatter] = None,
                   logger: Optional[StubLogger] = None) -> List[str]:
    """Emit stub statements for every root symbol of table

    Args:
        table: Root symbols of the file under processing
        origin: Identifier of the file under processing
        formatter: Optional statement formatter
        logger: Optional decision logger

    Returns:
        Ordered list of statements
    """
    return StubEmitter(table, origin, formatter=formatter, logger=logger).generate()
