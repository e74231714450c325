from __future__ import annotations

import logging
import mmap
import os
from collections import OrderedDict
from contextlib import suppress
from dataclasses import dataclass

from hexpeek.core.errors import StartupError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Page:
    index: int
    data: bytes


class PagedReader:
    """Read-only, random-access view over a file's bytes.

    Prefers `mmap` for zero-copy slices; falls back to buffered reads with a small LRU page cache.
    The full file is never loaded into memory at once. Reads never raise for out-of-range
    input: anything outside ``[0, size)`` is silently truncated.
    """

    def __init__(
        self,
        path: str,
        *,
        page_size: int = 64 * 1024,
        cache_pages: int = 16,
        use_mmap: bool = True,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        if cache_pages <= 0:
            raise ValueError("cache_pages must be positive")

        self._path = path
        st = os.stat(path)
        self._size = int(st.st_size)
        # Open file handle (kept for the lifetime of the reader)
        self._fh = open(path, "rb", buffering=0)  # noqa: SIM115
        self._page_size = int(page_size)
        self._cache_limit = int(cache_pages)
        self._cache: OrderedDict[int, _Page] = OrderedDict()

        self._mmap = None
        # mmap refuses zero-length mappings
        if use_mmap and self._size > 0:
            try:
                self._mmap = mmap.mmap(
                    self._fh.fileno(),
                    length=0,
                    access=mmap.ACCESS_READ,
                )
            except (OSError, ValueError) as exc:
                logger.debug("mmap unavailable for %s, using page cache: %s", path, exc)
                self._mmap = None

    def close(self) -> None:
        if getattr(self, "_mmap", None) is not None:
            with suppress(Exception):
                self._mmap.close()  # type: ignore[union-attr]
            self._mmap = None
        with suppress(Exception):
            self._fh.close()

    def __enter__(self) -> PagedReader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def size(self) -> int:
        """File size in bytes."""
        return self._size

    @property
    def path(self) -> str:
        return self._path

    @property
    def uses_mmap(self) -> bool:
        return self._mmap is not None

    def length(self) -> int:
        return self._size

    # Internal: fetch a page (LRU-cached) in buffered mode
    def _get_page(self, index: int) -> _Page:
        if index in self._cache:
            page = self._cache.pop(index)
            self._cache[index] = page  # move to end (most-recent)
            return page

        start = index * self._page_size
        if start >= self._size:
            data = b""
        else:
            to_read = min(self._page_size, self._size - start)
            self._fh.seek(start)
            data = self._fh.read(to_read)
        page = _Page(index=index, data=data)
        logger.debug("loaded page %d (%d bytes) of %s", index, len(data), self._path)

        self._cache[index] = page
        if len(self._cache) > self._cache_limit:
            self._cache.popitem(last=False)  # evict LRU
        return page

    def read(self, offset: int, count: int) -> bytes:
        """Read up to `count` bytes starting at `offset`.

        - Returns at most ``min(count, size - offset)`` bytes.
        - Negative `offset` or `count`, or `offset` >= size, returns b"".
        - Reading past EOF returns the truncated data.
        """
        if offset < 0 or count <= 0 or offset >= self._size:
            return b""

        end = min(self._size, offset + count)
        if self._mmap is not None:
            # mmap slicing gracefully truncates at EOF
            return bytes(self._mmap[offset:end])  # type: ignore[index]

        # Buffered path with page cache
        result = bytearray()
        pos = offset
        while pos < end:
            page_index = pos // self._page_size
            page = self._get_page(page_index)
            within = pos - (page_index * self._page_size)
            take = min(len(page.data) - within, end - pos)
            if take <= 0:
                break
            result += page.data[within : within + take]
            pos += take
        return bytes(result)

    def byte_at(self, offset: int) -> int | None:
        """Return the byte value at `offset`, or None outside the file."""
        if offset < 0 or offset >= self._size:
            return None

        if self._mmap is not None:
            return self._mmap[offset]  # type: ignore[index]

        page_index = offset // self._page_size
        within = offset - page_index * self._page_size
        page = self._get_page(page_index)
        if within >= len(page.data):
            return None
        return page.data[within]


def open_buffer(path: str, **kwargs) -> PagedReader:
    """Open `path` for viewing, turning OS failures into `StartupError`."""
    try:
        reader = PagedReader(path, **kwargs)
    except FileNotFoundError:
        raise StartupError(f"file not found: {path}", path=path) from None
    except IsADirectoryError:
        raise StartupError(f"is a directory: {path}", path=path) from None
    except PermissionError:
        raise StartupError(f"permission denied: {path}", path=path) from None
    except OSError as exc:
        raise StartupError(f"cannot open {path}: {exc.strerror or exc}", path=path) from exc
    logger.info("opened %s (%d bytes, mmap=%s)", path, reader.size, reader.uses_mmap)
    return reader
