"""Filesystem abstraction used by the scanner.

The discovery code only talks to a ``FileSystem``; ``LocalFileSystem`` backs it
with the real disk and ``InMemoryFileSystem`` with a dictionary, which keeps the
traversal tests independent of directory listing order on the host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Protocol


class FileSystem(Protocol):
    """Minimal filesystem capability consumed by discovery and reporting."""

    def readdir(self, path: str) -> list[str]: ...

    def is_directory(self, path: str) -> bool: ...

    def read_file(self, path: str) -> str: ...

    def write_file(self, path: str, content: str) -> None: ...

    def mkdir(self, path: str, parents: bool = True) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the local disk."""

    def readdir(self, path: str) -> list[str]:
        # Native listing order, callers rely on it for deterministic output
        return os.listdir(path)

    def is_directory(self, path: str) -> bool:
        try:
            return os.path.isdir(path)
        except OSError:
            return False

    def read_file(self, path: str) -> str:
        with open(path, encoding="utf-8") as fh:
            return fh.read()

    def write_file(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(content)

    def mkdir(self, path: str, parents: bool = True) -> None:
        if parents:
            os.makedirs(path, exist_ok=True)
        elif not os.path.isdir(path):
            os.mkdir(path)


@dataclass(slots=True)
class Node:
    """A directory (with ordered children names) or a file (with content)."""

    is_dir: bool
    children: list[str] = field(default_factory=list)
    content: str = ""


def directory(*children: str) -> Node:
    return Node(is_dir=True, children=list(children))


def file(content: str = "") -> Node:
    return Node(is_dir=False, content=content)


class InMemoryFileSystem:
    """Dictionary-backed ``FileSystem`` keyed by absolute path.

    Directories list exactly the ``children`` they were declared with, in that
    order. A child name without a matching key is neither a directory nor a
    readable file, which is enough to model plain files whose content is
    irrelevant (``yarn.lock``, ``index.js``...).
    """

    def __init__(self, structure: Mapping[str, Node]) -> None:
        self._nodes: dict[str, Node] = dict(structure)

    def readdir(self, path: str) -> list[str]:
        node = self._nodes.get(path)
        if node is None:
            raise FileNotFoundError(f"Directory not found: {path}")
        if not node.is_dir:
            raise NotADirectoryError(f"Not a directory: {path}")
        return list(node.children)

    def is_directory(self, path: str) -> bool:
        node = self._nodes.get(path)
        return node is not None and node.is_dir

    def read_file(self, path: str) -> str:
        node = self._nodes.get(path)
        if node is None:
            raise FileNotFoundError(f"File not found: {path}")
        if node.is_dir:
            raise IsADirectoryError(f"Is a directory: {path}")
        return node.content

    def write_file(self, path: str, content: str) -> None:
        self._nodes[path] = Node(is_dir=False, content=content)
        self._link(path)

    def mkdir(self, path: str, parents: bool = True) -> None:
        if path in self._nodes:
            return
        parent = os.path.dirname(path)
        if parent != path and parent not in self._nodes:
            if not parents:
                raise FileNotFoundError(f"Parent directory not found: {parent}")
            self.mkdir(parent, parents=True)
        self._nodes[path] = Node(is_dir=True)
        self._link(path)

    def _link(self, path: str) -> None:
        parent = self._nodes.get(os.path.dirname(path))
        name = os.path.basename(path)
        if parent is not None and parent.is_dir and name and name not in parent.children:
            parent.children.append(name)
