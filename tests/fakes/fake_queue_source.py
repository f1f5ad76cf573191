"""Canned queue source for tests."""

from __future__ import annotations


class FakeQueueSource:
    """Returns a fixed depth or raises a fixed error, no subprocess needed."""

    def __init__(self, depth: int = 0, *, error: Exception | None = None) -> None:
        self.depth = depth
        self.error = error
        self.calls = 0

    async def inspect(self) -> int:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.depth


class SettingsAwareQueueSource(FakeQueueSource):
    """Constructor-compatible with the dotted-path factory hook."""

    def __init__(self, settings: object) -> None:
        super().__init__(depth=7)
        self.settings = settings


NOT_A_CLASS = "not callable"
