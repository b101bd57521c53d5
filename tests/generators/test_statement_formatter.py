"""Tests for the statement formatter"""

from dtsstub.generators.statement_formatter import StatementFormatter


class TestStatementFormatter:
    """Test suite for StatementFormatter"""

    def test_top_level_with_value(self):
        """Test un-dotted scopes get a fresh declaration"""
        assert StatementFormatter().format("M", "{}") == "var M = {};"

    def test_top_level_without_value(self):
        assert StatementFormatter().format("x") == "var x;"

    def test_dotted_with_value(self):
        """Test dotted scopes are plain property assignments"""
        result = StatementFormatter().format("M.f", "function (x) {}")
        assert result == "M.f = function (x) {};"

    def test_dotted_without_value(self):
        assert StatementFormatter().format("C.prototype.g") == "C.prototype.g;"

    def test_empty_string_value_is_kept(self):
        """Test only None means no value"""
        assert StatementFormatter().format("x", "") == "var x = ;"

    def test_function_value(self):
        """Test parameters are joined without spaces"""
        assert StatementFormatter.function_value(["a", "b", "c"]) == "function (a,b,c) {}"
        assert StatementFormatter.function_value([]) == "function () {}"
