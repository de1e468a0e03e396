# pactl_parse.py
from __future__ import annotations

import re
from typing import List

from errors import ParseError
from models import StreamRecord
from pactl_cli import pactl_list_sink_inputs

ID_PREFIX = "Sink Input #"
MUTE_PREFIX = "Mute: "
VOLUME_PREFIX = "Volume: "
NAME_PREFIX = "application.name = "

# Left channel percent is group 1; the right channel only has to be well-formed.
VOLUME_RE = re.compile(
    r"Volume: front-left: \d+ / +(\d+)% / (-?[\d.]+|-inf) dB,"
    r"   front-right: \d+ / +(\d+)% / (-?[\d.]+|-inf) dB"
)


def split_blocks(text: str) -> List[List[str]]:
    raw = text.replace("\t", "")
    if not raw.strip():
        return []
    return [block.split("\n") for block in raw.split("\n\n") if block.strip()]


def parse_block(lines: List[str], index: int = 0) -> StreamRecord:
    head = lines[0]
    if not head.startswith(ID_PREFIX):
        raise ParseError(f"block {index}: expected '{ID_PREFIX}<id>', got {head!r}", block=index, line=head)
    try:
        sid = int(head[len(ID_PREFIX):])
    except ValueError:
        raise ParseError(f"block {index}: bad stream id in {head!r}", block=index, line=head) from None

    volume = 0
    mute = False
    name = ""

    for line in lines:
        if line.startswith(MUTE_PREFIX):
            mute = "yes" in line
        elif line.startswith(VOLUME_PREFIX):
            m = VOLUME_RE.match(line)
            if m is None:
                raise ParseError(f"block {index}: unrecognized volume line {line!r}", block=index, line=line)
            volume = int(m.group(1))
        elif line.startswith(NAME_PREFIX):
            # skip the opening quote too, then drop any remaining quotes
            name = line[len(NAME_PREFIX) + 1:].replace('"', "")

    return StreamRecord(id=sid, name=name, volume=volume, mute=mute)


def parse_sink_inputs(text: str) -> List[StreamRecord]:
    """
    Parse `pactl list sink-inputs` output into records, in output order.

    Blocks without a volume or application.name line are accepted with
    volume 0 / empty name.
    """
    return [parse_block(lines, i) for i, lines in enumerate(split_blocks(text))]


def snapshot(binary: str = "pactl") -> List[StreamRecord]:
    return parse_sink_inputs(pactl_list_sink_inputs(binary))
