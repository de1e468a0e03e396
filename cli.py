# cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from backend import Sources
from errors import CollaboratorError, NoMatchError, ParseError
from models import TrackedSource
from store_config import ConfigStore

log = logging.getLogger(__name__)

GuiApp = Callable[[Sources, ConfigStore], int]


def percent(value: str) -> int:
    # pactl reads "-10%" as a relative change, so negatives never reach it
    try:
        v = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid volume: {value!r}") from None
    if v < 0:
        raise argparse.ArgumentTypeError(f"volume must be 0 or more, got {v}")
    return v


def build_parser(prog: str = "pactl-mixer") -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description="Per-application volume mixer on top of pactl")
    p.add_argument("-l", "--list", action="store_true", help="List tracked sources")
    p.add_argument("-i", "--id", type=int, help="Select a source by its current sink input id")
    p.add_argument("-n", "--name", help="Select the first source whose name contains NAME")
    p.add_argument("-v", "--volume", type=percent, help="Set volume (percent, 0 or more)")
    p.add_argument("-m", "--mute", action="store_true", help="Mute the selected source")
    p.add_argument("-u", "--unmute", action="store_true", help="Unmute the selected source")
    p.add_argument("-L", "--lock", action="store_true", help="Pin the selected source in the config file")
    p.add_argument("--pactl", help="pactl binary to use (default: from config)")
    p.add_argument("--debug", action="store_true", help="Log debug messages to stderr")
    return p


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def format_source(s: TrackedSource) -> str:
    return (
        f"{s.name}\n"
        f"      id: {s.id}\n"
        f"    mute: {'true' if s.mute else 'false'}\n"
        f"  volume: {s.volume}%\n"
    )


def select_source(sources: Sources, sid: Optional[int], name: Optional[str]) -> TrackedSource:
    if sid is not None:
        s = sources.find_by_id(sid)
        if s is None:
            raise NoMatchError(f"no source matches {sid}")
        return s

    s = sources.find_by_name(name or "")
    if s is None:
        raise NoMatchError(f"no source matches '{name}'")
    return s


def run(argv: Optional[List[str]] = None, app: Optional[GuiApp] = None, prog: str = "pactl-mixer") -> int:
    args = build_parser(prog).parse_args(argv)
    store = ConfigStore()

    setup_logging(args.debug or store.debug())
    binary = args.pactl or store.pactl_binary()

    try:
        sources = Sources(binary=binary)
    except (CollaboratorError, ParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    sources.apply_locks(store.locked_names())

    wants_change = args.mute or args.unmute or args.volume is not None or args.lock

    if args.list:
        for s in sources:
            print(format_source(s))
        if not wants_change:
            return 0

    if args.id is None and args.name is None:
        if app is not None:
            return app(sources, store)
        print("error: must provide a name or id", file=sys.stderr)
        return 1

    try:
        source = select_source(sources, args.id, args.name)
    except NoMatchError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    log.debug("selected %r", source)

    if args.unmute:
        source.mute = False
    elif args.mute:
        source.mute = True

    if args.volume is not None:
        source.volume = args.volume

    if args.lock:
        source.locked = True
        store.set_locked(source.name, True)

    try:
        sources.flush_all()
    except CollaboratorError as e:
        print(f"error (when setting sources):\n{e}", file=sys.stderr)
        return 1

    if app is not None:
        return app(sources, store)
    return 0


def _run_gui(sources: Sources, store: ConfigStore) -> int:
    from main_window import run_app

    return run_app(sources, store)


def main() -> None:
    sys.exit(run())


def main_gui() -> None:
    sys.exit(run(app=_run_gui, prog="pactl-mixer-gui"))


if __name__ == "__main__":
    main()
