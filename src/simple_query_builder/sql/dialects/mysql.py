"""
MySQL-specific string escaping.

Mirrors the character set handled by mysql_real_escape_string().
"""

# Backslash first so later replacements are not escaped twice
_MYSQL_ESCAPES = {
    "\\": "\\\\",
    "\x00": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "'": "\\'",
    '"': '\\"',
    "\x1a": "\\Z",
}


class MySQLDialect:
    """MySQL escaping dialect implementation."""

    name = "mysql"

    def escape_string(self, raw: str) -> str:
        """
        Backslash-escape special characters for a single-quoted literal.

        Examples:
            >>> MySQLDialect().escape_string("it's")
            "it\\\\'s"
        """
        return "".join(_MYSQL_ESCAPES.get(ch, ch) for ch in raw)
