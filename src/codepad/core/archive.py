"""Incremental zip encoding.

``zipfile`` writes into a non-seekable sink, so every entry is emitted with a
data descriptor and the archive can be handed out chunk by chunk while it is
being built. At most about one chunk of compressed output is held at a time.
"""

import io
import zipfile
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

ZIP64_THRESHOLD = (1 << 31) - 1


@dataclass(frozen=True)
class ArchiveEntry:
    name: str
    content: str


class _ChunkSink(io.RawIOBase):
    """Write-only, unseekable buffer that is emptied by the reader."""

    def __init__(self) -> None:
        super().__init__()
        self._buffer = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:  # type: ignore[no-untyped-def,override]
        self._buffer.extend(b)
        return len(b)

    @property
    def pending(self) -> int:
        return len(self._buffer)

    def drain(self) -> bytes:
        chunk = bytes(self._buffer)
        self._buffer.clear()
        return chunk


def iter_zip(
    entries: Iterable[ArchiveEntry],
    chunk_size: int = 64 * 1024,
    compression_level: int = 6,
) -> Iterator[bytes]:
    """Yield a zip archive of ``entries`` as a sequence of byte chunks.

    Entry contents are encoded as UTF-8 and fed to the compressor in slices of
    ``chunk_size``; compressed output is yielded whenever at least ``chunk_size``
    bytes are pending and after each entry. The final chunk carries the central
    directory.
    """
    sink = _ChunkSink()
    with zipfile.ZipFile(
        sink,
        mode="w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=compression_level,
    ) as archive:
        for entry in entries:
            data = entry.content.encode("utf-8")
            with archive.open(entry.name, mode="w", force_zip64=len(data) > ZIP64_THRESHOLD) as dest:
                for start in range(0, len(data), chunk_size):
                    dest.write(data[start : start + chunk_size])
                    if sink.pending >= chunk_size:
                        yield sink.drain()
            if sink.pending:
                yield sink.drain()
    tail = sink.drain()
    if tail:
        yield tail
