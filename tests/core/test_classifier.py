"""Tests for the type node classifier"""

import pytest

from conftest import TARGET, LIB, builtin, obj
from dtsstub.core.classifier import TypeNodeClassifier
from dtsstub.core.type_nodes import (
    EnumNode,
    NodeVariant,
    ObjectKind,
    Property,
    ReferenceNode,
    TypeParamNode,
    UnknownNode,
)


class TestTypeNodeClassifier:
    """Test suite for TypeNodeClassifier"""

    @pytest.mark.parametrize("node, variant", [
        (builtin(), NodeVariant.BUILTIN),
        (ReferenceNode(origin=TARGET), NodeVariant.REFERENCE),
        (obj(ObjectKind.MODULE), NodeVariant.OBJECT),
        (EnumNode(origin=TARGET), NodeVariant.ENUM),
        (TypeParamNode(origin=TARGET), NodeVariant.TYPE_PARAM),
        (UnknownNode(origin=TARGET, type_name="tuple"), NodeVariant.UNKNOWN),
    ])
    def test_variant_of(self, node, variant):
        """Test each node reports its variant"""
        assert TypeNodeClassifier.variant_of(node) is variant

    def test_variant_of_foreign_value(self):
        """Test values outside the model are unknown"""
        assert TypeNodeClassifier.variant_of({"type": "object"}) is NodeVariant.UNKNOWN

    def test_variant_predicates(self):
        """Test variant predicates are mutually exclusive"""
        node = EnumNode(origin=TARGET)
        assert TypeNodeClassifier.is_enum(node)
        assert not TypeNodeClassifier.is_builtin(node)
        assert not TypeNodeClassifier.is_reference(node)
        assert not TypeNodeClassifier.is_object(node)
        assert not TypeNodeClassifier.is_type_param(node)

    def test_kind_predicates(self):
        """Test kind predicates only hold for object nodes of that kind"""
        module = obj(ObjectKind.MODULE)
        interface = obj(ObjectKind.INTERFACE)
        klass = obj(ObjectKind.CLASS)

        assert TypeNodeClassifier.is_module(module)
        assert TypeNodeClassifier.is_interface(interface)
        assert TypeNodeClassifier.is_class(klass)
        assert not TypeNodeClassifier.is_interface(module)
        assert not TypeNodeClassifier.is_class(builtin())

    def test_is_function_interface_with_calls(self):
        """Test interface with a call signature is a function"""
        node = obj(ObjectKind.INTERFACE, calls=[["x"]])
        assert TypeNodeClassifier.is_function(node)

    def test_is_function_interface_without_calls(self):
        """Test interface without call signatures is not a function"""
        assert not TypeNodeClassifier.is_function(obj(ObjectKind.INTERFACE))

    def test_is_function_module_with_calls(self):
        """Test modules never qualify as functions"""
        node = obj(ObjectKind.MODULE, calls=[["x"]])
        assert not TypeNodeClassifier.is_function(node)

    def test_is_function_class_with_calls(self):
        node = obj(ObjectKind.CLASS, calls=[[]])
        assert not TypeNodeClassifier.is_function(node)

    def test_is_from_origin_node(self):
        """Test origin comparison on nodes"""
        assert TypeNodeClassifier.is_from_origin(TARGET, builtin())
        assert not TypeNodeClassifier.is_from_origin(TARGET, builtin(origin=LIB))

    def test_is_from_origin_property(self):
        """Test origin comparison reads the property's own origin"""
        prop = Property(name="p", type=builtin(), origin=LIB)
        assert not TypeNodeClassifier.is_from_origin(TARGET, prop)
        assert TypeNodeClassifier.is_from_origin(LIB, prop)
