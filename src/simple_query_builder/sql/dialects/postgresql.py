"""
PostgreSQL-specific string escaping.

Assumes standard_conforming_strings=on (the server default since 9.1), where
backslashes are literal and only the single quote needs doubling.
"""

from ..exceptions import QueryValidationError


class PostgreSQLDialect:
    """PostgreSQL escaping dialect implementation."""

    name = "postgresql"

    def escape_string(self, raw: str) -> str:
        """
        Escape string content for a standard single-quoted literal.

        Args:
            raw: Unescaped string content

        Returns:
            Content with single quotes doubled

        Raises:
            QueryValidationError: If the content contains a NUL character,
                which PostgreSQL text values cannot hold

        Examples:
            >>> PostgreSQLDialect().escape_string("O'Brien")
            "O''Brien"
        """
        if "\x00" in raw:
            raise QueryValidationError("PostgreSQL string literals cannot contain NUL")
        return raw.replace("'", "''")
