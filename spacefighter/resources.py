"""Loading and caching of game resources."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")

_ID_LIMIT = 1 << 16


class ResourceLoadError(Exception):
    """Raised when a resource cannot be loaded from its path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"failed to load resource: {path}")
        self.path = path


class ResourceManager:
    """Loads resources from a content folder and keeps them for reuse.

    A resource type is any class that can be built with no arguments and has a
    ``load(path, manager)`` method returning True on success. A resource with a
    true ``cloneable`` attribute is handed out as a fresh ``clone()`` each time
    it is requested from the cache.
    """

    def __init__(self, content_path: str = "") -> None:
        self.content_path = content_path
        self._resources: dict[str, Any] = {}
        self._clones: list[Any] = []
        self._next_id = 0

    def _take_id(self) -> int:
        resource_id = self._next_id
        self._next_id = (self._next_id + 1) % _ID_LIMIT
        return resource_id

    def load(
        self,
        resource_type: type[T],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> T:
        """Return the resource at path, loading it if it is not cached."""
        cached = self._resources.get(path)
        if cached is not None:
            if not isinstance(cached, resource_type):
                raise TypeError(
                    f"resource {path!r} is a {type(cached).__name__}, "
                    f"not a {resource_type.__name__}"
                )
            if getattr(cached, "cloneable", False):
                clone = cached.clone()
                clone.resource_id = self._take_id()
                self._clones.append(clone)
                return clone
            return cached

        resource = resource_type()
        resource.resource_manager = self  # type: ignore[attr-defined]
        full_path = self.content_path + path if append_content_path else path
        if not resource.load(full_path, self):  # type: ignore[attr-defined]
            raise ResourceLoadError(full_path)
        if cache:
            self._resources[path] = resource
        resource.resource_id = self._take_id()  # type: ignore[attr-defined]
        return resource

    def unload_all(self) -> None:
        """Forget every cached resource and every clone handed out."""
        self._resources.clear()
        self._clones.clear()