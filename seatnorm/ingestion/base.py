"""Base adapter interface for reading manifest and query files."""

from abc import ABC, abstractmethod
from pathlib import Path


class BaseAdapter(ABC):
    """Abstract base class for file adapters."""

    @abstractmethod
    def parse(self, file_path: Path) -> list:
        """Parse a file into a list of typed rows."""
        ...

    @abstractmethod
    def _error(self, file_path: Path, message: str) -> Exception:
        """Build the adapter's fatal error for ``file_path``."""
        ...

    def _read_text(self, file_path: Path) -> str:
        """Read a UTF-8 file (BOM tolerated), converting failures to the adapter's error."""
        if not file_path.exists():
            raise self._error(file_path, "file not found")
        if not file_path.is_file():
            raise self._error(file_path, "not a regular file")
        try:
            return file_path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise self._error(file_path, f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise self._error(file_path, exc.strerror or str(exc)) from exc
