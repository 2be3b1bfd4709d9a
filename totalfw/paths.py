"""Resolution of application directories and small file-system helpers."""

from __future__ import annotations

import asyncio
import contextlib
import os
import shutil
import stat
from pathlib import Path
from typing import NamedTuple, Optional, Union

PathLike = Union[str, os.PathLike]

_DIRECTORIES = (
    "logs",
    "scripts",
    "public",
    "private",
    "databases",
    "plugins",
    "templates",
    "flowstreams",
    "modules",
    "tmp",
)


class PathInfo(NamedTuple):
    exists: bool
    size: int
    is_file: bool


class TPath:
    """Maps the application's named directories onto a base directory."""

    def __init__(self, base_dir: PathLike) -> None:
        self.base_dir = Path(base_dir)
        self._dirs = {name: self.base_dir / name for name in _DIRECTORIES}

    def _sub(self, name: str, path: Optional[str]) -> Path:
        directory = self._dirs[name]
        return directory if path is None else directory / path

    def root(self, path: Optional[str] = None) -> Path:
        return self.base_dir if path is None else self.base_dir / path

    def logs(self, path: Optional[str] = None) -> Path:
        return self._sub("logs", path)

    def scripts(self, path: Optional[str] = None) -> Path:
        return self._sub("scripts", path)

    def public(self, path: Optional[str] = None) -> Path:
        return self._sub("public", path)

    def private(self, path: Optional[str] = None) -> Path:
        return self._sub("private", path)

    def databases(self, path: Optional[str] = None) -> Path:
        return self._sub("databases", path)

    def plugins(self, path: Optional[str] = None) -> Path:
        return self._sub("plugins", path)

    def templates(self, path: Optional[str] = None) -> Path:
        return self._sub("templates", path)

    def flowstreams(self, path: Optional[str] = None) -> Path:
        return self._sub("flowstreams", path)

    def modules(self, path: Optional[str] = None) -> Path:
        return self._sub("modules", path)

    def tmp(self, path: Optional[str] = None) -> Path:
        return self._sub("tmp", path)

    def temp(self, path: Optional[str] = None) -> Path:
        """Alias of :meth:`tmp`."""
        return self.tmp(path)

    def directory(self, dir_type: str, path: Optional[str] = None) -> Path:
        """Resolve ``path`` in a named directory; unknown names give the base directory."""
        if dir_type not in self._dirs:
            return self.base_dir
        return self._sub(dir_type, path)

    async def exists(self, path: PathLike) -> PathInfo:
        """Return whether ``path`` exists, its size and whether it is a regular file."""
        try:
            info = await asyncio.to_thread(os.stat, path)
        except OSError:
            return PathInfo(False, 0, False)
        return PathInfo(True, info.st_size, stat.S_ISREG(info.st_mode))

    def join(self, directory: PathLike, path: str) -> Path:
        """Ensure ``directory`` exists and return ``path`` inside it."""
        self.verify(directory)
        return Path(directory) / path

    def route(self, path: str, directory: str) -> Path:
        """Resolve a route-style path against a named directory.

        ``~`` marks an absolute path, a leading ``_`` a plugin path.
        """
        if path.startswith("~"):
            return Path(path[1:])

        if path.startswith("_"):
            rest = path[1:]
            index = rest.find("/")
            if index != -1:
                if index + 2 > len(rest):
                    raise ValueError(f"incomplete plugin path: {path!r}")
                plugin_name = rest[:index]
                dir_part = "" if directory == "root" else directory
                path_part = rest[index + 2:]
                return self.plugins(f"{plugin_name}/{dir_part}/{path_part}")

        if directory == "root":
            return self.root(path)
        return self.directory(directory, path)

    async def unlink(self, path: PathLike) -> None:
        await asyncio.to_thread(os.remove, path)

    async def rmdir(self, path: PathLike) -> None:
        await asyncio.to_thread(shutil.rmtree, path)

    def verify(self, path: PathLike) -> None:
        self.mkdir(path)

    def mkdir(self, path: PathLike) -> None:
        """Create ``path`` with its parents if missing; failures are ignored."""
        target = Path(path)
        if not target.exists():
            with contextlib.suppress(OSError):
                target.mkdir(parents=True, exist_ok=True)

    def exists_dir(self, path: PathLike) -> bool:
        return Path(path).exists()