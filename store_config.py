# store_config.py
from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

log = logging.getLogger(__name__)


DEFAULT_CONFIG_TEXT = """\
[Mixer]
pactl = pactl
locked =
debug = no

[Gui]
max_volume = 200
auto_refresh = yes
refresh_interval_ms = 1200
"""

DEFAULT_MAX_VOLUME = 200
DEFAULT_REFRESH_MS = 1200


def user_config_dir(app_name: str) -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / app_name
    return Path.home() / ".config" / app_name


def _split_names(value: str) -> List[str]:
    # one name per line; parsed names never contain '"', so quotes keep edge spaces
    out: List[str] = []
    for line in value.splitlines():
        s = line.strip()
        if not s:
            continue
        if len(s) >= 2 and s[0] == s[-1] == '"':
            s = s[1:-1]
        out.append(s)
    return out


def _join_names(names: List[str]) -> str:
    return "".join(f'\n"{n}"' for n in names)


@dataclass(frozen=True)
class ConfigStore:
    app_name: str = "pactl-mixer"
    filename: str = "pactl-mixer.cfg"

    @property
    def dir_path(self) -> Path:
        return user_config_dir(self.app_name)

    @property
    def file_path(self) -> Path:
        return self.dir_path / self.filename

    def ensure_exists(self) -> None:
        self.dir_path.mkdir(parents=True, exist_ok=True)
        if not self.file_path.exists():
            self.file_path.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")

    def load(self) -> configparser.ConfigParser:
        self.ensure_exists()
        cfg = configparser.ConfigParser(interpolation=None)
        cfg.read_string(DEFAULT_CONFIG_TEXT)
        try:
            cfg.read(self.file_path, encoding="utf-8")
        except configparser.Error as e:
            log.warning("ignoring unreadable config %s: %s", self.file_path, e)
            cfg = configparser.ConfigParser(interpolation=None)
            cfg.read_string(DEFAULT_CONFIG_TEXT)
        return cfg

    def save(self, cfg: configparser.ConfigParser) -> None:
        self.ensure_exists()
        with self.file_path.open("w", encoding="utf-8") as f:
            cfg.write(f)

    def pactl_binary(self) -> str:
        return self.load().get("Mixer", "pactl", fallback="pactl").strip() or "pactl"

    def debug(self) -> bool:
        try:
            return self.load().getboolean("Mixer", "debug", fallback=False)
        except ValueError:
            return False

    def locked_names(self) -> List[str]:
        return _split_names(self.load().get("Mixer", "locked", fallback=""))

    def set_locked(self, name: str, locked: bool) -> None:
        cfg = self.load()
        names = _split_names(cfg.get("Mixer", "locked", fallback=""))
        if locked and name not in names:
            names.append(name)
        elif not locked and name in names:
            names.remove(name)
        else:
            return
        cfg.set("Mixer", "locked", _join_names(names))
        self.save(cfg)

    def max_volume(self) -> int:
        try:
            v = self.load().getint("Gui", "max_volume", fallback=DEFAULT_MAX_VOLUME)
        except ValueError:
            return DEFAULT_MAX_VOLUME
        return v if v > 0 else DEFAULT_MAX_VOLUME

    def auto_refresh(self) -> bool:
        try:
            return self.load().getboolean("Gui", "auto_refresh", fallback=True)
        except ValueError:
            return True

    def refresh_interval_ms(self) -> int:
        try:
            v = self.load().getint("Gui", "refresh_interval_ms", fallback=DEFAULT_REFRESH_MS)
        except ValueError:
            return DEFAULT_REFRESH_MS
        return v if v > 0 else DEFAULT_REFRESH_MS
