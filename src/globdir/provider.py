from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, Iterable, List, Optional, TypeVar

from .utils.logging import LoggingDescriptor

__all__ = ["FileSystemProvider", "NamespaceProvider"]

T = TypeVar("T")

LIST_ALL = "*"


class NamespaceProvider(ABC, Generic[T]):
    """Access to a hierarchy of directories and files with entries of type `T`.

    The glob engine never touches storage itself, everything it knows about the hierarchy comes
    from these four operations.
    """

    @abstractmethod
    def path_of(self, entry: T) -> str: ...

    @abstractmethod
    def list(self, path: str, search_pattern: str = LIST_ALL) -> Iterable[T]:
        """Returns the children of the directory `path`.

        Only the search pattern ``"*"`` must be supported.
        """

    @abstractmethod
    def find_directory(self, path: str) -> Optional[T]: ...

    @abstractmethod
    def find_file(self, path: str) -> Optional[T]: ...

    def entry_name(self, entry: T) -> str:
        path = self.path_of(entry)
        if os.sep == "\\":
            path = path.replace("\\", "/")
        path = path.rstrip("/")
        return path.rsplit("/", 1)[-1]


def check_search_pattern(search_pattern: str) -> None:
    if search_pattern != LIST_ALL:
        raise ValueError(f"Unsupported search pattern {search_pattern!r}, only {LIST_ALL!r} is supported.")


class FileSystemProvider(NamespaceProvider[Path]):
    """The local file system, entries are `pathlib.Path` objects.

    Listed entries keep the directory they were listed from as prefix, so relative patterns
    give relative results.
    """

    _logger = LoggingDescriptor()

    def path_of(self, entry: Path) -> str:
        return os.fspath(entry)

    def entry_name(self, entry: Path) -> str:
        return entry.name

    def list(self, path: str, search_pattern: str = LIST_ALL) -> List[Path]:
        check_search_pattern(search_pattern)

        try:
            with os.scandir(path) as it:
                return [Path(e.path) for e in it]
        except OSError as e:
            self._logger.debug(lambda: f"can't list {path!r}: {e}")
            return []

    def find_directory(self, path: str) -> Optional[Path]:
        result = Path(path)
        try:
            return result if result.is_dir() else None
        except OSError as e:
            self._logger.debug(lambda: f"can't stat {path!r}: {e}")
            return None

    def find_file(self, path: str) -> Optional[Path]:
        result = Path(path)
        try:
            return result if result.exists() and not result.is_dir() else None
        except OSError as e:
            self._logger.debug(lambda: f"can't stat {path!r}: {e}")
            return None
