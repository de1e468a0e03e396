import pytest

from cli import format_source, run
from conftest import LISTING_AB, block, listing
from models import TrackedSource
from store_config import ConfigStore


def test_format_source():
    s = TrackedSource(id=5, name="App A", volume=40, mute=False)
    assert format_source(s) == "App A\n      id: 5\n    mute: false\n  volume: 40%\n"


def test_list_only_exits_zero(fake_pactl, capsys):
    fake_pactl.listing = LISTING_AB
    assert run(["--list"]) == 0
    out = capsys.readouterr().out
    assert "App A\n      id: 5\n    mute: false\n  volume: 40%\n" in out
    assert "App B\n      id: 9\n    mute: true\n  volume: 75%\n" in out
    assert fake_pactl.mutations() == []


def test_mute_by_name_flushes_all(fake_pactl):
    fake_pactl.listing = LISTING_AB
    assert run(["-n", "A", "-m", "-v", "60"]) == 0
    assert fake_pactl.mutations() == [
        ["set-sink-input-volume", "5", "60%"],
        ["set-sink-input-mute", "5", "1"],
        ["set-sink-input-volume", "9", "75%"],
        ["set-sink-input-mute", "9", "1"],
    ]


def test_id_wins_over_name(fake_pactl):
    fake_pactl.listing = LISTING_AB
    assert run(["-i", "9", "-n", "App A", "-u"]) == 0
    assert ["set-sink-input-mute", "9", "0"] in fake_pactl.mutations()
    assert ["set-sink-input-mute", "5", "0"] in fake_pactl.mutations()


def test_unmute_wins_over_mute(fake_pactl):
    fake_pactl.listing = LISTING_AB
    assert run(["-i", "9", "-m", "-u"]) == 0
    assert ["set-sink-input-mute", "9", "0"] in fake_pactl.mutations()


def test_no_match(fake_pactl, capsys):
    fake_pactl.listing = LISTING_AB
    assert run(["-i", "42", "-m"]) == 1
    assert "error: no source matches 42" in capsys.readouterr().err

    assert run(["-n", "zzz", "-m"]) == 1
    assert "error: no source matches 'zzz'" in capsys.readouterr().err
    assert fake_pactl.mutations() == []


def test_selection_required_without_gui(fake_pactl, capsys):
    fake_pactl.listing = LISTING_AB
    assert run(["-m"]) == 1
    assert "must provide a name or id" in capsys.readouterr().err


def test_gui_fallback_gets_registry(fake_pactl):
    fake_pactl.listing = LISTING_AB
    seen = []

    def app(sources, store):
        seen.append([s.name for s in sources])
        return 0

    assert run([], app=app) == 0
    assert seen == [["App A", "App B"]]


def test_flush_failure_exits_nonzero(fake_pactl, capsys):
    fake_pactl.listing = LISTING_AB
    fake_pactl.fail["set-sink-input-volume"] = 1
    assert run(["-i", "5", "-v", "10"]) == 1
    assert "error (when setting sources):" in capsys.readouterr().err


def test_refresh_failure_exits_nonzero(fake_pactl, capsys):
    fake_pactl.fail["list"] = 1
    assert run(["--list"]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_lock_is_persisted(fake_pactl):
    fake_pactl.listing = LISTING_AB
    assert run(["-n", "App B", "--lock"]) == 0
    assert ConfigStore().locked_names() == ["App B"]


def test_pactl_override(fake_pactl):
    fake_pactl.listing = LISTING_AB
    assert run(["--pactl", "/opt/pactl", "-l"]) == 0
    assert fake_pactl.calls[0] == ["/opt/pactl", "list", "sink-inputs"]


def test_lock_name_with_percent(fake_pactl):
    fake_pactl.listing = listing(block(3, "100% Radio", 50))
    assert run(["-n", "Radio", "--lock", "-m"]) == 0
    assert ConfigStore().locked_names() == ["100% Radio"]
    assert ["set-sink-input-mute", "3", "1"] in fake_pactl.mutations()


def test_negative_volume_is_rejected(fake_pactl, capsys):
    fake_pactl.listing = LISTING_AB
    with pytest.raises(SystemExit) as ei:
        run(["-i", "5", "-v", "-10"])
    assert ei.value.code == 2
    assert "volume must be 0 or more" in capsys.readouterr().err
    assert fake_pactl.calls == []


def test_zero_volume_is_accepted(fake_pactl):
    fake_pactl.listing = LISTING_AB
    assert run(["-i", "5", "-v", "0"]) == 0
    assert ["set-sink-input-volume", "5", "0%"] in fake_pactl.mutations()
