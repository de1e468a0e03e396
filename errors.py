# errors.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from models import TrackedSource


class CollaboratorError(RuntimeError):
    def __init__(self, msg: str, *, cmd: Sequence[str] = (), code: Optional[int] = None) -> None:
        super().__init__(msg)
        self.cmd = list(cmd)
        self.code = code


class FlushError(CollaboratorError):
    """
    Raised by Sources.flush_all() for the first entry that could not be pushed.
    Entries before it have already been applied.
    """

    def __init__(self, source: "TrackedSource", cause: CollaboratorError) -> None:
        super().__init__(
            f"failed to flush '{source.name}' (id {source.id}): {cause}",
            cmd=cause.cmd,
            code=cause.code,
        )
        self.source = source


class ParseError(ValueError):
    def __init__(self, msg: str, *, block: int = -1, line: str = "") -> None:
        super().__init__(msg)
        self.block = block
        self.line = line


class NoMatchError(LookupError):
    pass
