"""Stream doubles for exercising read paths."""

from __future__ import annotations

import errno
import io


class FlakyStream(io.BytesIO):
    """BytesIO whose ``readinto`` fails with EIO after *fail_after* reads."""

    def __init__(self, data: bytes, fail_after: int) -> None:
        super().__init__(data)
        self._fail_after = fail_after
        self._reads = 0

    def readinto(self, buffer) -> int:
        if self._reads >= self._fail_after:
            raise OSError(errno.EIO, "Input/output error")
        self._reads += 1
        return super().readinto(buffer)


class TrickleStream(io.BytesIO):
    """BytesIO that never returns more than *chunk* bytes per read."""

    def __init__(self, data: bytes, chunk: int = 100) -> None:
        super().__init__(data)
        self._chunk = chunk

    def readinto(self, buffer) -> int:
        return super().readinto(memoryview(buffer)[: self._chunk])
