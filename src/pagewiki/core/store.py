"""Flat-file page storage.

Storage layout:
    <data_dir>/
    ├── FrontPage.txt
    └── TestPage.txt

Each page body is stored verbatim in ``<title>.txt``; there is no index or
metadata file. The file system is the only source of truth.
"""

import logging
import os
import tempfile
import threading
import weakref
from pathlib import Path

from pagewiki.core.page import PAGE_SUFFIX, Page
from pagewiki.errors import PageNotFoundError, PageSaveError

logger = logging.getLogger(__name__)

PAGE_FILE_MODE = 0o600


class PageStore:
    """Loads and saves pages as ``<title>.txt`` files in a directory.

    Writes go to a temporary file that is renamed into place, so readers
    never observe a partially written page. Saves to the same title are
    serialised; saves to different titles run independently.
    """

    def __init__(self, data_dir: Path) -> None:
        """Initialize store.

        Args:
            data_dir: Directory holding the page files
        """
        self._data_dir = data_dir
        # Handlers on one event loop already run saves one at a time; the
        # locks cover stores shared with worker threads. Entries disappear
        # once no save holds them.
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    @property
    def data_dir(self) -> Path:
        """Directory holding the page files."""
        return self._data_dir

    def path_for(self, title: str) -> Path:
        """Return the file path a title is stored under."""
        return self._data_dir / (title + PAGE_SUFFIX)

    def load(self, title: str) -> Page:
        """Load a page.

        Args:
            title: Page title

        Returns:
            Page with the file's raw bytes as body

        Raises:
            PageNotFoundError: If the file cannot be read for any reason
        """
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except (OSError, ValueError) as e:
            logger.debug(f"Could not load {path}: {e}")
            raise PageNotFoundError(title) from e
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Write a page body, replacing any existing content.

        The file is created with owner-only read/write permission.

        Args:
            page: Page to persist

        Raises:
            PageSaveError: If the file cannot be written
        """
        path = self.path_for(page.title)
        with self._lock_for(page.title):
            try:
                self._write_atomic(path, page.body)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to save {path}: {e}")
                raise PageSaveError(page.title, str(e)) from e
        logger.debug(f"Saved {len(page.body)} bytes to {path}")

    def _lock_for(self, title: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(title)
            if lock is None:
                lock = self._locks[title] = threading.Lock()
            return lock

    def _write_atomic(self, path: Path, data: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, PAGE_FILE_MODE)
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
