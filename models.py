# models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from errors import CollaboratorError
from pactl_cli import pactl_set_mute, pactl_set_volume

STALE_ID = -1


@dataclass(frozen=True)
class StreamRecord:
    id: int
    name: str
    volume: int  # percent, may exceed 100
    mute: bool


@dataclass
class TrackedSource:
    id: int
    name: str
    volume: int
    mute: bool
    locked: bool = False
    binary: str = field(default="pactl", repr=False, compare=False)

    @classmethod
    def from_record(cls, rec: StreamRecord, binary: str = "pactl") -> "TrackedSource":
        return cls(id=rec.id, name=rec.name, volume=rec.volume, mute=rec.mute, binary=binary)

    @property
    def is_stale(self) -> bool:
        return self.id == STALE_ID

    def state(self) -> Tuple[int, bool]:
        return self.volume, self.mute

    def flush(self) -> None:
        """
        Push volume, then mute, to the live stream.
        Stops at the first failing command; nothing is rolled back.
        """
        if self.is_stale:
            raise CollaboratorError(f"'{self.name}' has no live stream (stale id)")
        pactl_set_volume(self.id, self.volume, binary=self.binary)
        pactl_set_mute(self.id, self.mute, binary=self.binary)
