"""Statement formatter for dtsstub

Turns a dotted scope path and an optional value expression into a single
JavaScript declaration or assignment statement.
"""

from typing import Optional

SCOPE_SEPARATOR = "."


class StatementFormatter:
    """Formats stub statements"""

    DECLARATION_KEYWORD = "var"
    EMPTY_OBJECT = "{}"
    EMPTY_CONSTRUCTOR = "function () {}"

    def format(self, scope: str, value: Optional[str] = None) -> str:
        """Format one statement

        Un-dotted scopes introduce a fresh binding; dotted scopes assign a
        property onto an already introduced root.

        Args:
            scope: Dotted scope path
            value: Value expression, or None for a value-less declaration

        Returns:
            Statement string

        Example:
            >>> StatementFormatter().format("M", "{}")
            'var M = {};'
            >>> StatementFormatter().format("C.prototype.g")
            'C.prototype.g;'
        """
        statement = ""
        if SCOPE_SEPARATOR not in scope:
            statement += f"{self.DECLARATION_KEYWORD} "
        statement += scope
        if value is not None:
            statement += f" = {value}"
        statement += ";"
        return statement

    @staticmethod
    def function_value(parameter_names) -> str:
        """Empty function expression taking the given parameters

        Example:
            >>> StatementFormatter.function_value(["x", "y"])
            'function (x,y) {}'
        """
        return f"function ({','.join(parameter_names)}) {{}}"
