"""In-memory archive assembly for export bundles."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

from ..errors import ExportIOError

logger = logging.getLogger(__name__)

# Fixed timestamp so identical inputs produce identical archives.
_ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)


class ArchiveBuilder:
    """Collects ``name -> content`` entries and writes them as one zip.

    Entries are kept in insertion order.  Adding the same name twice is
    an error naming the file, since it would silently drop generated
    output.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, bytes] = {}

    def add(self, name: str, content: Union[str, bytes]) -> None:
        normalized = name.replace("\\", "/").lstrip("/")
        if not normalized or normalized.endswith("/"):
            raise ExportIOError(f"Invalid archive entry name: {name!r}", filename=name)
        if normalized in self._entries:
            raise ExportIOError(f"Duplicate archive entry: {normalized}", filename=normalized)
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self._entries[normalized] = data

    def names(self) -> List[str]:
        return list(self._entries)

    def items(self) -> Iterator[Tuple[str, bytes]]:
        return iter(self._entries.items())

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def read_text(self, name: str) -> str:
        return self._entries[name].decode("utf-8")

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        current = None
        try:
            with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                for current, data in self._entries.items():
                    info = zipfile.ZipInfo(current, date_time=_ZIP_DATE_TIME)
                    info.compress_type = zipfile.ZIP_DEFLATED
                    info.external_attr = 0o644 << 16
                    archive.writestr(info, data)
        except (OSError, ValueError, zipfile.BadZipFile) as exc:
            raise ExportIOError(f"Failed to assemble archive: {exc}", filename=current) from exc
        return buffer.getvalue()

    def write(self, path: Union[str, Path]) -> Path:
        """Write the zip to ``path`` and return it."""

        target = Path(path)
        payload = self.to_bytes()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)
        except OSError as exc:
            raise ExportIOError(f"Failed to write archive: {exc}", filename=str(target)) from exc
        logger.info("Wrote archive %s (%d files)", target, len(self._entries))
        return target


__all__ = ["ArchiveBuilder"]
