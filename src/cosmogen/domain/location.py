# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Spatial hierarchy node.

A Location has an identity, a parent, a position local to that parent and
the chain of local positions from the root down to itself. Relative
positions between nodes are summed from their closest common ancestor so
that small offsets survive next to very large ones.
"""
import uuid
from typing import Iterator

import numpy as np

from cosmogen.domain.vectors import ORIGIN, Vector3, as_vector


def new_id() -> str:
    return uuid.uuid4().hex


class Location:
    """Node in the parent/child tree."""

    def __init__(
        self,
        id: str | None = None,
        parent: "Location | None" = None,
        position: Vector3 = ORIGIN,
        name: str | None = None,
        parent_id: str | None = None,
        absolute_position: tuple[Vector3, ...] | None = None,
    ) -> None:
        self.id = id or new_id()
        self.name = name
        self.parent: Location | None = None
        self._parent_id = parent_id
        self._position = as_vector(position)
        self.children: list[Location] = []
        self._absolute_position: tuple[Vector3, ...] = (
            tuple(as_vector(p) for p in absolute_position)
            if absolute_position is not None
            else (self._position,)
        )
        if parent is not None:
            parent.attach(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"

    @property
    def parent_id(self) -> str | None:
        return self.parent.id if self.parent is not None else self._parent_id

    @property
    def position(self) -> Vector3:
        return self._position

    @position.setter
    def position(self, value: Vector3) -> None:
        self._position = as_vector(value)
        self._refresh_absolute_position()

    @property
    def absolute_position(self) -> tuple[Vector3, ...]:
        """Local positions from the root down to this node, inclusive."""
        return self._absolute_position

    def _refresh_absolute_position(self) -> None:
        if self.parent is not None:
            self._absolute_position = self.parent.absolute_position + (self._position,)
        else:
            self._absolute_position = self._absolute_position[:-1] + (self._position,)
        for child in self.children:
            child._refresh_absolute_position()

    def attach(self, child: "Location") -> None:
        """Make this node the child's parent."""
        if child.parent is not None and child.parent is not self:
            child.parent.detach(child)
        child.parent = self
        child._parent_id = self.id
        if child not in self.children:
            self.children.append(child)
        child._refresh_absolute_position()

    def detach(self, child: "Location") -> None:
        self.children.remove(child)
        child.parent = None

    def ancestors(self) -> Iterator["Location"]:
        """Parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def root(self) -> "Location":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def walk(self) -> Iterator["Location"]:
        """This node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, node_id: str) -> "Location | None":
        """Search the whole tree this node belongs to."""
        for node in self.root.walk():
            if node.id == node_id:
                return node
        return None

    def is_accessible(self, node_id: str) -> bool:
        """True for ancestors and for children of ancestors (siblings included)."""
        for ancestor in self.ancestors():
            if ancestor.id == node_id:
                return True
            if any(c.id == node_id and c is not self for c in ancestor.children):
                return True
        return False

    @property
    def absolute_coordinates(self) -> Vector3:
        return as_vector(np.sum(np.asarray(self._absolute_position), axis=0))

    def _path(self) -> list["Location"]:
        path = [self]
        path.extend(self.ancestors())
        path.reverse()
        return path

    def localize(self, other: "Location") -> Vector3:
        """Position of ``other`` in this node's local frame (relative to its center)."""
        mine = self._path()
        theirs = other._path()
        if mine[0] is not theirs[0]:
            return as_vector(np.subtract(other.absolute_coordinates, self.absolute_coordinates))
        common = 0
        while common < min(len(mine), len(theirs)) and mine[common] is theirs[common]:
            common += 1
        down = np.sum([n.position for n in theirs[common:]] or [ORIGIN], axis=0)
        up = np.sum([n.position for n in mine[common:]] or [ORIGIN], axis=0)
        return as_vector(down - up)

    def distance_to(self, other: "Location") -> float:
        return float(np.linalg.norm(self.localize(other)))
