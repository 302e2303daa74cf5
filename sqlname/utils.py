"""Parsing of raw, possibly quoted, possibly schema-qualified names."""

import re

from .errors import AmbiguousNameError
from .logger.logger import log_debug, log_warning
from .name import QualifiedName

# unquoted run without quote, dot or ASCII whitespace | fully quoted token
TOKEN_RE = re.compile(r'[^".\s]+|"[^"]*"', re.ASCII)


def extract_schema_qualified_name(raw: str) -> QualifiedName:
    """Extract a QualifiedName from ``raw``.

    ``schema`` is None when ``raw`` names no schema. Both parts come back
    without surrounding quotes, whether or not ``raw`` had them. Supported
    forms include:

    * ``table_name``
    * ``"table.name"``
    * ``schema_name.table_name``
    * ``schema_name."table.name"``
    * ``"schema_name".table_name``
    * ``"schema.name"."table name"``

    Tokens after the second are ignored. Raises AmbiguousNameError when no
    token is found.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Qualified name must be a string, got {type(raw).__name__}")

    tokens = TOKEN_RE.findall(raw)
    if not tokens:
        raise AmbiguousNameError(raw)
    if raw.count('"') % 2:
        log_warning(f"unbalanced quote in {raw!r}")
    if len(tokens) > 2:
        log_debug(f"ignoring trailing tokens {tokens[2:]!r} in {raw!r}")

    if len(tokens) == 1:
        schema, identifier = None, tokens[0]
    else:
        schema, identifier = tokens[:2]
    return QualifiedName(schema, identifier)
