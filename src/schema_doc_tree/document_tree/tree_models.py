"""Document tree entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Structural kind of a documented schema node."""

    SCALAR = "scalar"
    ARRAY = "array"
    OBJECT = "object"


class Visibility(str, Enum):
    """Audience annotation carried by the ``visibility`` schema keyword."""

    FRONTEND = "frontend"
    SECRET = "secret"


class FrozenMapping(dict):
    """Read-only, hashable ``dict`` used for mapping-valued metadata.

    It stays a ``dict`` subclass so JSON encoding and equality with plain
    mappings keep working.
    """

    __slots__ = ()

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(frozenset(self.items()))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (dict(self),))

    def _read_only(self, *args: Any, **kwargs: Any) -> Any:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = _read_only
    __delitem__ = _read_only
    __ior__ = _read_only
    clear = _read_only
    pop = _read_only
    popitem = _read_only
    setdefault = _read_only
    update = _read_only


@dataclass(frozen=True)
class MetadataEntry:
    """One labelled schema keyword value."""

    keyword: str
    label: str
    value: Any

    def as_pair(self) -> tuple[str, Any]:
        return (self.label, self.value)


@dataclass(frozen=True)
class DocumentNode:  # pylint: disable=too-many-instance-attributes
    """Render-agnostic description of one schema node and its descendants.

    ``path`` is empty for the root, object properties append ``.name`` and
    array items append ``[]``. ``required`` reflects the parent's ``required``
    keyword, so the root and array items are never required.

    Property names are joined verbatim, so a name containing ``.`` or ending
    in ``[]`` can repeat the path of another node. Use the tree position, not
    ``path`` alone, when nodes must be told apart.
    """

    path: str
    depth: int
    kind: NodeKind
    name: str = ""
    required: bool = False
    visibility: Visibility | None = None
    metadata: tuple[MetadataEntry, ...] = ()
    description: str | None = None
    children: tuple[DocumentNode, ...] = field(default_factory=tuple)

    def metadata_pairs(self) -> list[tuple[str, Any]]:
        return [entry.as_pair() for entry in self.metadata]

    def walk(self) -> Iterator[DocumentNode]:
        """Yield this node and every descendant in display order."""
        yield self
        for child in self.children:
            yield from child.walk()
