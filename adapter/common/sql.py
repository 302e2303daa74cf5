"""SQL identifier helpers: quoting and qualified table references.

``quote_ident`` is the quoting capability handed to ``QualifiedName.quoted``.
It encloses the identifier in double quotes and doubles embedded double
quotes, which is the rule DuckDB shares with PostgreSQL and SQLite.
"""

from sqlname import QualifiedName, extract_schema_qualified_name


def _ensure_str(ident: object) -> str:
    if not isinstance(ident, str):
        raise TypeError("Identifier must be a string")
    return ident


def validate_identifier(ident: str) -> None:
    """
    Reject identifiers that cannot be quoted safely:
    - non-strings (TypeError)
    - empty strings
    - NUL, newline or carriage-return characters
    """
    ident = _ensure_str(ident)
    if not ident:
        raise ValueError("Identifier must not be empty")
    if "\x00" in ident or "\n" in ident or "\r" in ident:
        raise ValueError("Identifier contains disallowed control characters")


def quote_ident(ident: str) -> str:
    """
    Examples:
      quote_ident('table') -> '"table"'
      quote_ident('we"ir d') -> '"we""ir d"'
    """
    validate_identifier(ident)
    return f'"{ident.replace(chr(34), chr(34) * 2)}"'


def as_qualified_name(name: str | QualifiedName) -> QualifiedName:
    if isinstance(name, QualifiedName):
        return name
    return extract_schema_qualified_name(name)


def qualified_table(name: str | QualifiedName) -> str:
    return as_qualified_name(name).quoted(quote_ident)
