from .__version__ import __version__
from .api import get_matches, glob
from .flags import DEFAULT_FLAGS, GlobFlags
from .matcher import GlobMatcher
from .provider import FileSystemProvider, NamespaceProvider
from .segment import SegmentMatcher, fnmatch
from .ungroup import ungroup_globs
from .virtual import VirtualEntry, VirtualNamespace

__all__ = [
    "DEFAULT_FLAGS",
    "FileSystemProvider",
    "GlobFlags",
    "GlobMatcher",
    "NamespaceProvider",
    "SegmentMatcher",
    "VirtualEntry",
    "VirtualNamespace",
    "__version__",
    "fnmatch",
    "get_matches",
    "glob",
    "ungroup_globs",
]
