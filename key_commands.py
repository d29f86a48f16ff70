import sys
from dataclasses import dataclass
from typing import Optional

CTRL_Y = 25
CTRL_Z = 26
DELETE_KEY = "Delete"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    ctrl: bool = False
    meta: bool = False


def is_mac_platform(platform: Optional[str] = None, convention: str = "auto") -> bool:
    if convention == "cmd":
        return True
    if convention == "ctrl":
        return False
    platform = sys.platform if platform is None else platform
    return platform.lower().startswith("darwin") or "mac" in platform.lower()


def _has_modifier(event: KeyEvent, mac: bool) -> bool:
    # Cmd (meta) always counts; Ctrl only off the Mac
    return event.meta or (event.ctrl and not mac)


def dispatch_key_event(session, event: KeyEvent, mac: Optional[bool] = None) -> bool:
    """Route undo/redo/delete keystrokes from a GUI host to the session."""
    if mac is None:
        mac = is_mac_platform(convention=session.config.get("MODIFIER_CONVENTION", "auto"))

    if _has_modifier(event, mac):
        key = event.key.lower()
        if key == "z":
            session.undo()
            return True
        if key == "y":
            session.redo()
            return True

    if event.key == DELETE_KEY:
        session.delete_selected()
        return True

    return False


def handle_key(session, ch: int) -> bool:
    """Same commands for a curses host, where Ctrl chords arrive as control codes."""
    import curses

    if ch == CTRL_Z:
        session.undo()
        return True
    if ch == CTRL_Y:
        session.redo()
        return True
    if ch == curses.KEY_DC:
        session.delete_selected()
        return True
    return False
