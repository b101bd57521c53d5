"""Tests for the top-level guard"""

from conftest import TARGET, builtin, obj, table
from dtsstub.core.guard import TopLevelGuard
from dtsstub.core.type_nodes import ObjectKind, ReferenceNode


class TestTopLevelGuard:
    """Test suite for TopLevelGuard"""

    def test_reference_always_stops(self):
        """Test references stop at every depth"""
        guard = TopLevelGuard(table())
        ref = ReferenceNode(origin=TARGET, name="Other")
        assert guard.should_stop("x", ref, 0)
        assert guard.should_stop("M.x", ref, 3)

    def test_root_at_depth_zero_expands(self):
        """Test a root is expanded even though its name is top-level"""
        node = obj(ObjectKind.INTERFACE)
        guard = TopLevelGuard(table(env={"A": node}))
        assert not guard.should_stop("A", node, 0)

    def test_top_level_name_below_root_stops(self):
        """Test a scope naming a root stops below depth 0"""
        guard = TopLevelGuard(table(modules={"M": obj(ObjectKind.MODULE)}, env={"x": builtin()}))
        assert guard.should_stop("M", obj(ObjectKind.MODULE), 1)
        assert guard.should_stop("x", builtin(), 2)

    def test_nested_scope_continues(self):
        """Test dotted scopes never match a root"""
        guard = TopLevelGuard(table(env={"A": obj(ObjectKind.INTERFACE)}))
        assert not guard.should_stop("A.b", builtin(), 1)
        assert not guard.is_reentry("A.b", 1)
        assert guard.is_reentry("A", 1)
