"""Page entity."""

from dataclasses import dataclass

PAGE_SUFFIX = ".txt"


@dataclass(frozen=True)
class Page:
    """A page identified by its title.

    The body is kept as raw bytes, exactly as stored on disk.
    """

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded for display, replacing invalid UTF-8 sequences."""
        return self.body.decode("utf-8", errors="replace")
