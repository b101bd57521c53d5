"""Cycle / top-level guard for dtsstub

Stops recursion into references and into members that name an
independently declared root symbol.
"""

from dtsstub.core.classifier import TypeNodeClassifier
from dtsstub.core.declaration_table import DeclarationTable
from dtsstub.core.type_nodes import TypeNode


class TopLevelGuard:
    """Decides whether the emitter must stop at a node"""

    def __init__(self, table: DeclarationTable) -> None:
        self.table = table

    def should_stop(self, scope: str, node: TypeNode, depth: int) -> bool:
        """Check if traversal must not continue into node

        A root reached at depth 0 is always expanded. Below depth 0 a scope
        that matches a root name is emitted by that root instead.

        Args:
            scope: Dotted scope path of node
            node: Type node being visited
            depth: Recursion depth (0 for roots)

        Returns:
            True if nothing should be emitted for node
        """
        if TypeNodeClassifier.is_reference(node):
            return True
        return self.is_reentry(scope, depth)

    def is_reentry(self, scope: str, depth: int) -> bool:
        """Check if scope re-enters a root below depth 0"""
        return depth > 0 and self.table.is_top_level(scope)
