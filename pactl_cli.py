# pactl_cli.py
from __future__ import annotations

import logging
import os
import subprocess
from typing import List, Sequence

from errors import CollaboratorError

log = logging.getLogger(__name__)


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
    log.debug("running %s", " ".join(cmd))
    try:
        return subprocess.run(list(cmd), capture_output=True)
    except OSError as e:
        raise CollaboratorError(f"cannot run {cmd[0]}: {e}", cmd=cmd, code=e.errno) from e


def _check(p: subprocess.CompletedProcess[bytes], cmd: List[str]) -> None:
    if p.returncode == 0:
        return

    msg = (p.stderr or p.stdout or b"").decode("utf-8", errors="replace").strip()
    reason = os.strerror(p.returncode) if p.returncode > 0 else f"killed by signal {-p.returncode}"
    text = f"{' '.join(cmd)} exited with {p.returncode} ({reason})"
    if msg:
        text = f"{text}: {msg}"
    raise CollaboratorError(text, cmd=cmd, code=p.returncode)


def pactl_list_sink_inputs(binary: str = "pactl") -> str:
    cmd = [binary, "list", "sink-inputs"]
    p = _run(cmd)
    _check(p, cmd)

    try:
        return p.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CollaboratorError(f"{binary} output is not valid UTF-8: {e}", cmd=cmd) from e


def pactl_set_volume(stream_id: int, volume: int, binary: str = "pactl") -> None:
    cmd = [binary, "set-sink-input-volume", str(stream_id), f"{volume}%"]
    _check(_run(cmd), cmd)


def pactl_set_mute(stream_id: int, mute: bool, binary: str = "pactl") -> None:
    cmd = [binary, "set-sink-input-mute", str(stream_id), "1" if mute else "0"]
    _check(_run(cmd), cmd)
