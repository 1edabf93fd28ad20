from pathlib import Path
from typing import List

import pytest

from globdir import VirtualNamespace

GLOB_TEST_FILES = [
    "dirA/File1.txt",
    "dirA/File2.txt",
    "dirA/OtherFile1.log",
    "dirA/OtherFile2.txt",
    "dirB/File1.txt",
    "dirB/File2.txt",
]

DEEP_TEST_FILES = [
    *GLOB_TEST_FILES,
    "dirA/sub/deep/Notes.txt",
    "dirB/sub/Readme.txt",
    "dirB/sub/empty/",
    ".hidden/File3.txt",
    ".secret.txt",
]


def _create_tree(root: Path, paths: List[str]) -> Path:
    for p in paths:
        target = root / p
        if p.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(p, encoding="utf-8")
    return root


@pytest.fixture
def glob_test_dir(tmp_path: Path) -> Path:
    return _create_tree(tmp_path / "GlobTestFiles", GLOB_TEST_FILES)


@pytest.fixture
def deep_test_dir(tmp_path: Path) -> Path:
    return _create_tree(tmp_path / "DeepTestFiles", DEEP_TEST_FILES)


@pytest.fixture
def virtual_tree() -> VirtualNamespace:
    return VirtualNamespace.from_paths(DEEP_TEST_FILES)
