from store_config import DEFAULT_MAX_VOLUME, ConfigStore


def test_defaults_written_on_first_load(config_home):
    store = ConfigStore()
    assert store.pactl_binary() == "pactl"
    assert store.locked_names() == []
    assert store.max_volume() == DEFAULT_MAX_VOLUME
    assert store.auto_refresh() is True
    assert store.refresh_interval_ms() == 1200
    assert store.debug() is False
    assert (config_home / "pactl-mixer" / "pactl-mixer.cfg").exists()


def test_set_locked_round_trip():
    store = ConfigStore()
    store.set_locked("Firefox", True)
    store.set_locked("mpv", True)
    store.set_locked("Firefox", True)
    assert store.locked_names() == ["Firefox", "mpv"]

    store.set_locked("Firefox", False)
    assert store.locked_names() == ["mpv"]

    store.set_locked("mpv", False)
    assert store.locked_names() == []


def test_bad_values_fall_back(config_home):
    store = ConfigStore()
    store.ensure_exists()
    store.file_path.write_text(
        "[Mixer]\npactl =\ndebug = maybe\n\n[Gui]\nmax_volume = loud\nrefresh_interval_ms = -5\n",
        encoding="utf-8",
    )
    assert store.pactl_binary() == "pactl"
    assert store.debug() is False
    assert store.max_volume() == DEFAULT_MAX_VOLUME
    assert store.refresh_interval_ms() == 1200


def test_unreadable_file_uses_defaults(config_home):
    store = ConfigStore()
    store.ensure_exists()
    store.file_path.write_text("not an ini file\n", encoding="utf-8")
    assert store.max_volume() == DEFAULT_MAX_VOLUME


def test_names_keep_percent_and_edge_spaces():
    store = ConfigStore()
    store.set_locked("100% Radio", True)
    store.set_locked("  padded ", True)
    assert store.locked_names() == ["100% Radio", "  padded "]


def test_hand_edited_names_and_percent_values(config_home):
    store = ConfigStore()
    store.ensure_exists()
    store.file_path.write_text(
        "[Mixer]\npactl = /opt/50%/pactl\nlocked =\n    mpv\n    \"  spaced  \"\n",
        encoding="utf-8",
    )
    assert store.pactl_binary() == "/opt/50%/pactl"
    assert store.locked_names() == ["mpv", "  spaced  "]
