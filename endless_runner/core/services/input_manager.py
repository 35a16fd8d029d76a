"""
input_manager.py
----------------
Input tracking for keyboard and touch gestures.

Provides:
- InputState: the set of currently active input tokens, with press/release
  and touch-gesture operations that can be driven without pygame
- InputManager: translates pygame events into InputState mutations and
  routes the global hotkeys (restart, fullscreen, hitboxes, quit)
"""

import pygame

from endless_runner.core.debug.debug_logger import DebugLogger


# ===========================================================
# Input Tokens
# ===========================================================

ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"
ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"

SWIPE_UP = "swipe up"
SWIPE_DOWN = "swipe down"
SWIPE_LEFT = "swipe left"
SWIPE_RIGHT = "swipe right"

SWIPE_TOKENS = (SWIPE_UP, SWIPE_DOWN, SWIPE_LEFT, SWIPE_RIGHT)

# Tokens the player reacts to, grouped by intent
MOVE_RIGHT = (ARROW_RIGHT, SWIPE_RIGHT)
MOVE_LEFT = (ARROW_LEFT, SWIPE_LEFT)
JUMP = (ARROW_UP, SWIPE_UP)

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        pygame.K_UP: ARROW_UP,
        pygame.K_DOWN: ARROW_DOWN,
        pygame.K_LEFT: ARROW_LEFT,
        pygame.K_RIGHT: ARROW_RIGHT,
    },
    "system": {
        "restart": [pygame.K_RETURN, pygame.K_KP_ENTER],
        "toggle_fullscreen": [pygame.K_F11],
        "toggle_hitboxes": [pygame.K_F3],
        "quit": [pygame.K_ESCAPE],
    },
}


# ===========================================================
# Input State
# ===========================================================

class InputState:
    """
    Currently held inputs as an ordered, duplicate-free list of tokens.

    Keyboard presses add arrow tokens; touch gestures add swipe tokens once
    the finger has moved more than touch_threshold from where it landed.
    """

    __slots__ = ("_keys", "touch_threshold", "touch_x", "touch_y")

    def __init__(self, touch_threshold: float = 30):
        self._keys = []
        self.touch_threshold = touch_threshold
        self.touch_x = None
        self.touch_y = None

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def tokens(self) -> tuple:
        """Active tokens in press order."""
        return tuple(self._keys)

    def has(self, token: str) -> bool:
        return token in self._keys

    def any_of(self, tokens) -> bool:
        """True if any of the given tokens is active."""
        return any(token in self._keys for token in tokens)

    def __contains__(self, token):
        return token in self._keys

    def __len__(self):
        return len(self._keys)

    # ===========================================================
    # Mutation
    # ===========================================================

    def press(self, token: str) -> bool:
        """Add a token unless already held. Returns True if it was added."""
        if token in self._keys:
            return False
        self._keys.append(token)
        return True

    def release(self, token: str) -> bool:
        """Remove a token. Releasing a token that is not held does nothing."""
        if token not in self._keys:
            return False
        self._keys.remove(token)
        return True

    # ===========================================================
    # Touch Gestures
    # ===========================================================

    def touch_start(self, x: float, y: float):
        """Anchor a new gesture at the touch point."""
        self.touch_x = x
        self.touch_y = y

    def touch_move(self, x: float, y: float) -> bool:
        """
        Convert finger displacement from the anchor into swipe tokens.

        Returns:
            bool: True if this move started a downward swipe (the restart
            gesture), False otherwise
        """
        if self.touch_x is None or self.touch_y is None:
            return False

        distance_y = y - self.touch_y
        distance_x = x - self.touch_x
        swiped_down = False

        if distance_y < -self.touch_threshold:
            self.press(SWIPE_UP)
        elif distance_y > self.touch_threshold:
            swiped_down = self.press(SWIPE_DOWN)

        if distance_x > self.touch_threshold:
            self.press(SWIPE_RIGHT)
        elif distance_x < -self.touch_threshold:
            self.press(SWIPE_LEFT)

        return swiped_down

    def touch_end(self):
        """Lift the finger: all swipe tokens are dropped."""
        for token in SWIPE_TOKENS:
            self.release(token)


# ===========================================================
# Input Manager
# ===========================================================

class InputManager:
    """
    Routes pygame events to an InputState and to global actions.

    Usage:
        manager = InputManager(state, display_manager=display)
        manager.on_restart = loop.restart_from_input
        for event in pygame.event.get():
            manager.handle_event(event, game_over=session.game_over)
    """

    def __init__(self, state: InputState = None, display_manager=None,
                 game_size=(1200, 720), key_bindings=None):
        """
        Args:
            state: InputState to mutate (a fresh one if None)
            display_manager: Maps finger positions from window to game space
            game_size: (width, height) used for finger positions without a display
            key_bindings: Custom bindings dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.state = state if state is not None else InputState()
        self.display_manager = display_manager
        self.game_width, self.game_height = game_size
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        self._key_to_token = dict(self.key_bindings["gameplay"])
        self._system_keys = {
            action: tuple(keys) for action, keys in self.key_bindings["system"].items()
        }

        # Callbacks for global actions, wired by the game loop
        self.on_restart = None
        self.on_toggle_fullscreen = None
        self.on_toggle_hitboxes = None
        self.on_quit = None

        self._validate_bindings()

    def _validate_bindings(self):
        """Warn if a system key is also bound to a gameplay token."""
        system_keys = set()
        for keys in self._system_keys.values():
            system_keys.update(keys)

        overlap = system_keys & set(self._key_to_token)
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Event Routing
    # ===========================================================

    def handle_event(self, event, game_over: bool = False) -> bool:
        """
        Apply a single pygame event.

        Args:
            event: pygame event
            game_over: Whether the session is currently over (enables restart)

        Returns:
            bool: True if the event was consumed
        """
        if event.type == pygame.QUIT:
            self._fire(self.on_quit, "quit")
            return True

        if event.type == pygame.KEYDOWN:
            return self._handle_key_down(event.key, game_over)

        if event.type == pygame.KEYUP:
            token = self._key_to_token.get(event.key)
            if token is None:
                return False
            self.state.release(token)
            return True

        if event.type == pygame.FINGERDOWN:
            self.state.touch_start(*self._finger_to_game(event))
            return True

        if event.type == pygame.FINGERMOTION:
            swiped_down = self.state.touch_move(*self._finger_to_game(event))
            if swiped_down and game_over:
                self._fire(self.on_restart, "restart (swipe down)")
            return True

        if event.type == pygame.FINGERUP:
            self.state.touch_end()
            return True

        return False

    def _handle_key_down(self, key, game_over: bool) -> bool:
        token = self._key_to_token.get(key)
        if token is not None:
            self.state.press(token)
            return True

        if key in self._system_keys.get("restart", ()):
            if game_over:
                self._fire(self.on_restart, "restart (enter)")
            return True

        if key in self._system_keys.get("toggle_fullscreen", ()):
            self._fire(self.on_toggle_fullscreen, "toggle fullscreen")
            return True

        if key in self._system_keys.get("toggle_hitboxes", ()):
            self._fire(self.on_toggle_hitboxes, "toggle hitboxes")
            return True

        if key in self._system_keys.get("quit", ()):
            self._fire(self.on_quit, "quit")
            return True

        return False

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    def _finger_to_game(self, event):
        """Finger events carry 0..1 window coordinates; map them to game pixels."""
        if self.display_manager is not None:
            window_w, window_h = self.display_manager.get_window_size()
            return self.display_manager.screen_to_game_pos(event.x * window_w, event.y * window_h)
        return event.x * self.game_width, event.y * self.game_height

    @staticmethod
    def _fire(callback, name: str):
        DebugLogger.action(f"Input action: {name}", category="input")
        if callback is not None:
            callback()
