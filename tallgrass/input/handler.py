"""Input handler — converts PyGame key events into input event names.

Event names are single printable characters, or one of the names in
_SPECIAL_KEYS for keys without one. The simulation decides what (if
anything) each name means.
"""

from __future__ import annotations

import pygame

_SPECIAL_KEYS: dict[int, str] = {
    pygame.K_ESCAPE: "Esc",
    pygame.K_TAB: "Tab",
    pygame.K_RETURN: "Enter",
    pygame.K_UP: "Up",
    pygame.K_DOWN: "Down",
    pygame.K_RIGHT: "Right",
    pygame.K_LEFT: "Left",
}


def key_name(event: pygame.event.Event) -> str | None:
    """Name a KEYDOWN event, or None if it has no name."""
    if event.type != pygame.KEYDOWN:
        return None
    special = _SPECIAL_KEYS.get(event.key)
    if special is not None:
        return special
    ch = getattr(event, "unicode", "")
    if len(ch) == 1 and 0x20 <= ord(ch) < 0x7F:
        return ch
    return None


class InputHandler:
    """Collects input event names from a batch of PyGame events."""

    def process_events(self, events: list[pygame.event.Event]) -> list[str]:
        names: list[str] = []
        for event in events:
            name = key_name(event)
            if name is not None:
                names.append(name)
        return names
