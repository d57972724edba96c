"""
Temporary storage for generated CSS files.

One directory per TempStorage, created on first use and removed at
interpreter exit (or earlier via cleanup()).
"""

import asyncio
import atexit
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional
from uuid import uuid4

logger = logging.getLogger(__name__)


class TempStorage:
    """Lazily created temporary directory holding generated CSS files."""

    def __init__(self, prefix: str = "font-responder-", parent: Optional[Path] = None):
        self._prefix = prefix
        self._parent = parent
        self._path: Optional[Path] = None
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Optional[Path]:
        """The memoized directory, or None before the first get_path()."""
        return self._path

    async def get_path(self) -> Path:
        """Return the temp directory, creating it on the first call.

        Raises OSError if the directory cannot be created.
        """
        if self._path is not None:
            return self._path

        async with self._lock:
            # Another caller may have created it while we waited.
            if self._path is None:
                parent = str(self._parent) if self._parent else None
                created = await asyncio.to_thread(
                    tempfile.mkdtemp, prefix=self._prefix, dir=parent,
                )
                self._path = Path(created).resolve()
                atexit.register(self.cleanup)
                logger.info(f"Created CSS temp directory: {self._path}")
        return self._path

    async def write_staged(self, name: str, text: str) -> Path:
        """Write ``text`` to a uniquely named file next to ``name``.

        The file becomes ``name`` only through commit(). Raises OSError if
        the write fails.
        """
        directory = await self.get_path()
        staged = directory / f".{uuid4().hex[:12]}_{name}"
        await asyncio.to_thread(staged.write_text, text, encoding="utf-8")
        return staged

    def commit(self, staged: Path, name: str) -> Path:
        """Atomically move a staged file to ``name`` and return its path."""
        path = staged.with_name(name)
        os.replace(staged, path)
        return path

    def cleanup(self) -> None:
        """Remove the temp directory and everything in it."""
        if self._path is None:
            return
        path, self._path = self._path, None
        atexit.unregister(self.cleanup)
        shutil.rmtree(path, ignore_errors=True)
        logger.info(f"Removed CSS temp directory: {path}")
