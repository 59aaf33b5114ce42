"""Loading and caching of game resources read from files."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Optional, TypeVar

_ID_MASK = 0xFFFF


class Resource:
    """Something loaded from a file; subclasses override ``load`` for their format."""

    def __init__(self) -> None:
        self.id: int = 0
        self.resource_manager: Optional[ResourceManager] = None
        self.data: bytes = b""

    def load(self, path: str, manager: ResourceManager) -> bool:
        """Read the file at ``path``; return False if it cannot be read."""
        try:
            self.data = Path(path).read_bytes()
        except OSError:
            return False
        return True

    def is_cloneable(self) -> bool:
        """Return True if each request should receive its own copy."""
        return False

    def clone(self) -> Resource:
        """Return a copy of this resource."""
        return copy.copy(self)


R = TypeVar("R", bound=Resource)


class ResourceManager:
    """Loads resources, caches them by path and hands out ids."""

    def __init__(self, content_path: str = "") -> None:
        self.content_path = content_path
        self._resources: dict[str, Resource] = {}
        self._clones: list[Resource] = []
        self._next_id = 0

    def _take_id(self) -> int:
        current = self._next_id
        self._next_id = (self._next_id + 1) & _ID_MASK
        return current

    def unload_all(self) -> None:
        """Forget every cached resource and every clone handed out."""
        self._resources.clear()
        self._clones.clear()

    def load(
        self,
        resource_type: type[R],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> Optional[R]:
        """Return the resource at ``path``, loading it if needed; None if loading fails."""
        cached = self._resources.get(path)
        if cached is not None:
            if not isinstance(cached, resource_type):
                raise TypeError(
                    f"{path!r} is cached as {type(cached).__name__}, "
                    f"not {resource_type.__name__}"
                )
            if cached.is_cloneable():
                duplicate = cached.clone()
                duplicate.id = self._take_id()
                self._clones.append(duplicate)
                return duplicate  # type: ignore[return-value]
            return cached

        resource = resource_type()
        resource.resource_manager = self
        full_path = self.content_path + path if append_content_path else path

        if not resource.load(full_path, self):
            return None
        if cache:
            self._resources[path] = resource
        resource.id = self._take_id()
        return resource