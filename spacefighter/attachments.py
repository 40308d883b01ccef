"""Items that can be attached to game objects, and the objects that carry them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from spacefighter.vector2 import Vector2


class Attachable(ABC):
    """An object that can have items attached to it."""

    @abstractmethod
    def get_attachment(self, key: str | int) -> Attachment | None:
        """Return the attachment with the given key or index, or None if there is none."""


class Attachment(ABC):
    """An item that can be attached to an attachable object at an offset."""

    def __init__(self, key: str) -> None:
        self._key = key
        self.attached_to: Any = None
        self.offset: Vector2 = Vector2.ZERO

    @property
    def key(self) -> str:
        """The key used to look the attachment up on its owner."""
        return self._key

    @property
    @abstractmethod
    def attachment_type(self) -> str:
        """A name for the kind of attachment, such as "Weapon"."""

    def attach_to(self, attachable: Attachable, offset: Vector2) -> None:
        """Attach to an object, positioned at offset from its centre."""
        self.attached_to = attachable
        self.offset = offset

    @abstractmethod
    def update(self, elapsed: float) -> None:
        """Advance the attachment by elapsed seconds."""