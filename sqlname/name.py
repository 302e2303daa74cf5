"""Value object for schema-qualified SQL names.

Usually the name of a relation, but it can equally hold a schema-qualified
type name. ``schema`` and ``identifier`` are kept unquoted so that rendering
never quotes twice.
"""

from collections.abc import Callable
from dataclasses import dataclass

SEPARATOR = "."
QUOTE = '"'


def unquote(part: str | None) -> str | None:
    """Strip one leading and one trailing double quote, each only if present.

    Example:
        '"table.name"' -> 'table.name'
        '"half' -> 'half'
        None -> None
    """
    if part is None:
        return None
    if part.startswith(QUOTE):
        part = part[1:]
    if part.endswith(QUOTE):
        part = part[:-1]
    return part


@dataclass(frozen=True, eq=False)
class QualifiedName:
    """An identifier with an optional schema prefix."""

    schema: str | None
    identifier: str | None

    def __post_init__(self):
        object.__setattr__(self, "schema", unquote(self.schema))
        object.__setattr__(self, "identifier", unquote(self.identifier))

    @property
    def parts(self) -> tuple[str, ...]:
        """Non-null parts in order; the basis of equality and hashing."""
        return tuple(p for p in (self.schema, self.identifier) if p is not None)

    def __str__(self) -> str:
        return SEPARATOR.join(self.parts)

    def quoted(self, quote_ident: Callable[[str], str]) -> str:
        """
        Render each part with the given quoting function and join with ``.``.

        Usage:
            name.quoted(quote_ident)  # '"schema"."table"'
        """
        return SEPARATOR.join(quote_ident(p) for p in self.parts)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return other.parts == self.parts

    def __hash__(self) -> int:
        return hash(self.parts)
