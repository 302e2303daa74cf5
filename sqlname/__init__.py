"""Schema-qualified SQL name parsing and rendering."""

from .errors import AmbiguousNameError, QualifiedNameError
from .name import QualifiedName
from .utils import extract_schema_qualified_name

__all__ = [
    "AmbiguousNameError",
    "QualifiedName",
    "QualifiedNameError",
    "extract_schema_qualified_name",
]
