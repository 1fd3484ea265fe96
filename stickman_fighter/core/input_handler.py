"""
Input handling
==============
Keyboard capture and the immutable per-tick input snapshot.
"""

import pygame
from typing import Dict, FrozenSet, Set, Iterable
from dataclasses import dataclass

from stickman_fighter.config import ControlScheme


# pygame key code -> lowercase key identifier
KEY_IDENTIFIERS: Dict[int, str] = {
    pygame.K_a: 'a',
    pygame.K_d: 'd',
    pygame.K_w: 'w',
    pygame.K_s: 's',
    pygame.K_f: 'f',
    pygame.K_g: 'g',
    pygame.K_h: 'h',
    pygame.K_k: 'k',
    pygame.K_l: 'l',
    pygame.K_SEMICOLON: ';',
    pygame.K_LEFT: 'arrowleft',
    pygame.K_RIGHT: 'arrowright',
    pygame.K_UP: 'arrowup',
    pygame.K_DOWN: 'arrowdown',
    pygame.K_RETURN: 'enter',
    pygame.K_ESCAPE: 'escape',
    pygame.K_SPACE: ' ',
    pygame.K_p: 'p',
    pygame.K_r: 'r',
    pygame.K_m: 'm',
    pygame.K_1: '1',
    pygame.K_2: '2',
}


@dataclass(frozen=True)
class ControlInput:
    """Which of a fighter's seven controls are held this tick"""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    attack: bool = False
    block: bool = False
    special: bool = False

    @classmethod
    def from_keys(cls, keys: Iterable[str], scheme: ControlScheme) -> 'ControlInput':
        held = frozenset(keys)
        return cls(
            left=scheme.left in held,
            right=scheme.right in held,
            up=scheme.up in held,
            down=scheme.down in held,
            attack=scheme.attack in held,
            block=scheme.block in held,
            special=scheme.special in held,
        )


@dataclass(frozen=True)
class InputState:
    """Held keys, captured once at the start of a tick"""
    keys: FrozenSet[str] = frozenset()

    def is_held(self, key: str) -> bool:
        return key in self.keys

    def controls_for(self, scheme: ControlScheme) -> ControlInput:
        return ControlInput.from_keys(self.keys, scheme)


class InputHandler:
    """
    Centralized keyboard capture.
    Tracks held keys and keys pressed since the last frame.
    """

    def __init__(self):
        self._held: Set[str] = set()
        self._just_pressed: Set[str] = set()
        self.quit_requested = False

    def update(self):
        """Reset per-frame state. Call once per frame before processing events."""
        self._just_pressed.clear()
        self.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            key = KEY_IDENTIFIERS.get(event.key)
            if key is None:
                return
            if key not in self._held:
                self._just_pressed.add(key)
            self._held.add(key)

        elif event.type == pygame.KEYUP:
            key = KEY_IDENTIFIERS.get(event.key)
            if key is not None:
                self._held.discard(key)

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are not delivered while unfocused
            self._held.clear()

    def snapshot(self) -> InputState:
        """Immutable copy of the currently held keys"""
        return InputState(frozenset(self._held))

    def is_key_pressed(self, key: str) -> bool:
        return key in self._held

    def is_key_just_pressed(self, key: str) -> bool:
        return key in self._just_pressed

    def should_quit(self) -> bool:
        return self.quit_requested
