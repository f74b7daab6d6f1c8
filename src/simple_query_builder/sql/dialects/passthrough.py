"""Identity dialect: string content is emitted unchanged."""


class IdentityDialect:
    """Pass-through escaping for callers that sanitize values upstream."""

    name = "identity"

    def escape_string(self, raw: str) -> str:
        return raw
