"""In-process ledger of already announced videos."""

from video_announcer.core.interfaces import Ledger


class InMemoryLedger(Ledger):
    """Track delivered videos for the lifetime of the process.

    Nothing is persisted: a restart forgets the history and previously
    announced videos may be announced again.
    """

    def __init__(self) -> None:
        self._keys: set[str] = set()

    def contains(self, key: str) -> bool:
        return key in self._keys

    def record(self, key: str) -> None:
        self._keys.add(key)

    def __len__(self) -> int:
        return len(self._keys)
