from __future__ import annotations

import posixpath
from typing import Dict, Iterable, List, NamedTuple, Optional

from .provider import LIST_ALL, NamespaceProvider, check_search_pattern

__all__ = ["VirtualEntry", "VirtualNamespace"]


class VirtualEntry(NamedTuple):
    path: str
    is_dir: bool

    def __str__(self) -> str:
        return self.path


class VirtualNamespace(NamespaceProvider[VirtualEntry]):
    """An in-memory hierarchy of directories and files.

    All paths are posix style. Relative paths are resolved against `cwd`. Entries are reported with
    their normalized absolute path, children are listed in insertion order.
    """

    def __init__(self, cwd: str = "/") -> None:
        self._children: Dict[str, List[str]] = {"/": []}
        self._files: Dict[str, VirtualEntry] = {}
        self.cwd = self._normalize(cwd, "/")
        self.add_directory(self.cwd)

    @classmethod
    def from_paths(cls, paths: Iterable[str], cwd: str = "/") -> VirtualNamespace:
        """Creates a namespace from a list of paths, paths ending with ``/`` are directories."""
        result = cls(cwd)
        for p in paths:
            if p.endswith("/"):
                result.add_directory(p)
            else:
                result.add_file(p)
        return result

    @staticmethod
    def _normalize(path: str, cwd: str) -> str:
        path = path.replace("\\", "/")
        result = posixpath.normpath(posixpath.join(cwd, path))
        # normpath keeps a leading double slash
        if result.startswith("//"):
            result = "/" + result.lstrip("/")
        return result

    def normalize(self, path: str) -> str:
        return self._normalize(path, self.cwd)

    def add_directory(self, path: str) -> VirtualEntry:
        path = self.normalize(path)
        if path in self._files:
            raise ValueError(f"{path!r} is already a file.")

        if path not in self._children:
            parent = posixpath.dirname(path)
            self.add_directory(parent)
            self._children[path] = []
            self._children[parent].append(path)

        return VirtualEntry(path, True)

    def add_file(self, path: str) -> VirtualEntry:
        path = self.normalize(path)
        if path in self._children:
            raise ValueError(f"{path!r} is already a directory.")

        if path not in self._files:
            parent = posixpath.dirname(path)
            self.add_directory(parent)
            self._files[path] = VirtualEntry(path, False)
            self._children[parent].append(path)

        return self._files[path]

    def _entry(self, path: str) -> VirtualEntry:
        return self._files.get(path) or VirtualEntry(path, True)

    def path_of(self, entry: VirtualEntry) -> str:
        return entry.path

    def list(self, path: str, search_pattern: str = LIST_ALL) -> List[VirtualEntry]:
        check_search_pattern(search_pattern)

        return [self._entry(p) for p in self._children.get(self.normalize(path), [])]

    def find_directory(self, path: str) -> Optional[VirtualEntry]:
        path = self.normalize(path)
        return VirtualEntry(path, True) if path in self._children else None

    def find_file(self, path: str) -> Optional[VirtualEntry]:
        return self._files.get(self.normalize(path))
