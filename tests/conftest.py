import subprocess

import pytest

import pactl_cli

LISTING_AB = """\
Sink Input #5
\tDriver: protocol-native.c
\tOwner Module: 9
\tClient: 12
\tSink: 0
\tSample Specification: s16le 2ch 44100Hz
\tChannel Map: front-left,front-right
\tFormat: pcm, format.sample_format = "\\"s16le\\""  format.rate = "44100"
\tCorked: no
\tMute: no
\tVolume: front-left: 26214 /  40% / -23.88 dB,   front-right: 26214 /  40% / -23.88 dB
\t        balance 0.00
\tBuffer Latency: 0 usec
\tSink Latency: 0 usec
\tResample method: n/a
\tProperties:
\t\tmedia.name = "Playback"
\t\tapplication.name = "App A"
\t\tnative-protocol.peer = "UNIX socket client"

Sink Input #9
\tDriver: protocol-native.c
\tOwner Module: 9
\tClient: 14
\tSink: 0
\tMute: yes
\tVolume: front-left: 49152 /  75% / -7.50 dB,   front-right: 49152 /  75% / -7.50 dB
\t        balance 0.00
\tProperties:
\t\tmedia.name = "Music"
\t\tapplication.name = "App B"
"""


def block(sid, name, volume, mute=False):
    return (
        f"Sink Input #{sid}\n"
        f"\tMute: {'yes' if mute else 'no'}\n"
        f"\tVolume: front-left: 1 / {volume:3d}% / 0.00 dB,   front-right: 1 / {volume:3d}% / 0.00 dB\n"
        f"\tProperties:\n"
        f'\t\tapplication.name = "{name}"\n'
    )


def listing(*blocks):
    return "\n".join(blocks)


class FakePactl:
    def __init__(self):
        self.listing = ""
        self.stdout = None
        self.calls = []
        self.fail = {}
        self.fail_ids = {}

    def __call__(self, cmd, capture_output=False, **kw):
        self.calls.append(list(cmd))
        sub = cmd[1]
        if sub == "list":
            out = self.stdout if self.stdout is not None else self.listing.encode("utf-8")
            return subprocess.CompletedProcess(cmd, self.fail.get("list", 0), stdout=out, stderr=b"")

        rc = self.fail.get(sub, 0) or self.fail_ids.get((sub, cmd[2]), 0)
        stderr = b"Failure: No such entity" if rc else b""
        return subprocess.CompletedProcess(cmd, rc, stdout=b"", stderr=stderr)

    def mutations(self):
        return [c[1:] for c in self.calls if c[1] != "list"]


@pytest.fixture
def fake_pactl(monkeypatch):
    fake = FakePactl()
    monkeypatch.setattr(pactl_cli.subprocess, "run", fake)
    return fake


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    d = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(d))
    return d
