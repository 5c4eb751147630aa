"""Public scene-graph exception types."""

from __future__ import annotations


class SceneGraphError(Exception):
    """Base class for scene-graph contract violations."""


class InvalidGeometryError(SceneGraphError, ValueError):
    """Size or range values that cannot describe a drawable node."""


class AttachError(SceneGraphError):
    """A node could not be attached to a parent or surface."""


class CyclicAttachError(AttachError):
    """Attaching would make a node its own ancestor."""


class NodeAlreadyAttachedError(AttachError):
    """The node is still owned by another parent or surface."""


__all__ = [
    "AttachError",
    "CyclicAttachError",
    "InvalidGeometryError",
    "NodeAlreadyAttachedError",
    "SceneGraphError",
]
