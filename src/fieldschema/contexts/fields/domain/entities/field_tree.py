from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from ..errors import DuplicateFieldKey
from .field import Field

_KEY_SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class FieldTree:
    """
    Ordered forest of top-level fields with dotted-path key queries.

    Sibling names are not unique: several siblings may share a name and each
    of them is explored by lookups. Query methods never raise.

    Related: .field
    """

    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def has_key(self, key: str) -> bool:
        """
        Check whether a dotted key names a leaf field.

        Args:
            key: Dot-separated path, e.g. `test.find`.
        Returns:
            bool: True if some walk from a root consumes every segment and ends
            on a field without sub-fields.
        Assumptions:
            Internal nodes are not keys; `has_node` covers them.
        Raises:
            None.
        Side Effects:
            None.
        """
        return any(field.is_leaf for field in self._resolve(key))

    def has_node(self, key: str) -> bool:
        """True if a dotted path resolves to any field, leaf or internal."""
        return any(True for _ in self._resolve(key))

    def get_field(self, key: str) -> Field | None:
        """
        Return the field at an exact dotted path.

        Args:
            key: Dot-separated path.
        Returns:
            Field | None: First matching field in depth-first order, or None.
        Assumptions:
            Internal nodes are returned as well as leaves.
        Raises:
            None.
        Side Effects:
            None.
        """
        return next(self._resolve(key), None)

    def get_keys(self) -> Iterator[str]:
        """
        Enumerate dotted keys of all leaf fields.

        Args:
            None.
        Returns:
            Iterator[str]: Lazy depth-first keys in declaration order; every call
            starts a fresh enumeration.
        Assumptions:
            Fields with sub-fields contribute only their leaves' keys.
        Raises:
            None.
        Side Effects:
            None.
        """
        return _iter_keys(self.fields, namespace="")

    def concat(self, other: FieldTree) -> FieldTree:
        """
        Append another tree's top-level fields after this tree's fields.

        Args:
            other: Tree to append.
        Returns:
            FieldTree: New tree; both inputs are left untouched.
        Assumptions:
            A key conflicts when it already names a node in the other tree, or
            when one of its ancestors is a leaf there.
        Raises:
            DuplicateFieldKey: Listing every conflicting key in order.
        Side Effects:
            None.
        """
        conflicts: list[str] = []
        for key in other.get_keys():
            if self._conflicts_with(key) and key not in conflicts:
                conflicts.append(key)
        for key in self.get_keys():
            if other._conflicts_with(key) and key not in conflicts:
                conflicts.append(key)
        if conflicts:
            raise DuplicateFieldKey(tuple(conflicts))
        return FieldTree(fields=self.fields + other.fields)

    def _conflicts_with(self, key: str) -> bool:
        if self.has_node(key):
            return True
        segments = key.split(_KEY_SEPARATOR)
        for size in range(1, len(segments)):
            if self.has_key(_KEY_SEPARATOR.join(segments[:size])):
                return True
        return False

    def _resolve(self, key: str) -> Iterator[Field]:
        if not key:
            return iter(())
        return _iter_matches(self.fields, key.split(_KEY_SEPARATOR))


def concat_fields(*trees: FieldTree) -> FieldTree:
    """
    Concatenate several trees left to right, rejecting duplicate keys.

    Args:
        trees: Trees to concatenate.
    Returns:
        FieldTree: Combined tree; empty when no trees are given.
    Assumptions:
        Conflicts are checked pairwise against the accumulated tree.
    Raises:
        DuplicateFieldKey: If any two trees define the same key.
    Side Effects:
        None.
    """
    result = FieldTree()
    for tree in trees:
        result = result.concat(tree)
    return result


def _iter_matches(fields: Sequence[Field], segments: Sequence[str]) -> Iterator[Field]:
    head = segments[0]
    rest = segments[1:]
    for field in fields:
        if field.name != head:
            continue
        if not rest:
            yield field
        else:
            yield from _iter_matches(field.fields, rest)


def _iter_keys(fields: Sequence[Field], *, namespace: str) -> Iterator[str]:
    for field in fields:
        key = f"{namespace}{_KEY_SEPARATOR}{field.name}" if namespace else field.name
        if field.is_leaf:
            yield key
        else:
            yield from _iter_keys(field.fields, namespace=key)
