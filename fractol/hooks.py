"""Windows, event hooks and the event loop that feeds them."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import reduce
from typing import Optional


class EventType(enum.IntEnum):
    """Event kinds, numbered as the X protocol numbers them."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


class EventMask(enum.IntFlag):
    """Selection masks that say which events a window wants."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17


@dataclass(frozen=True)
class Event:
    """One event addressed to a window.

    ``close_request`` marks a client message in which the window manager asks
    the window to close.
    """

    type: EventType
    window: Optional[Window] = None
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


@dataclass
class _Hook:
    func: Callable[..., object]
    mask: int


@dataclass(eq=False)
class Window:
    """A window with one hook per event type."""

    width: int
    height: int
    title: str
    _hooks: dict[EventType, _Hook] = field(default_factory=dict, init=False, repr=False)

    def hook(self, event_type: int, mask: int, func: Callable[..., object]) -> None:
        """Call ``func`` for events of ``event_type``, selecting them with ``mask``."""
        self._hooks[EventType(event_type)] = _Hook(func, int(mask))

    def key_hook(self, func: Callable[[int], object]) -> None:
        """Call ``func(key)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func)

    def mouse_hook(self, func: Callable[[int, int, int], object]) -> None:
        """Call ``func(button, x, y)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func)

    def expose_hook(self, func: Callable[[], object]) -> None:
        """Call ``func()`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        return reduce(lambda acc, h: acc | h.mask, self._hooks.values(), 0)

    def dispatch(self, event: Event) -> None:
        """Hand ``event`` to the hook installed for its type, if any."""
        if event.type is EventType.CLIENT_MESSAGE and event.close_request:
            on_destroy = self._hooks.get(EventType.DESTROY_NOTIFY)
            if on_destroy is not None:
                on_destroy.func()
        registered = self._hooks.get(event.type)
        if registered is None:
            return
        func = registered.func
        if event.type in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            func(event.key)
        elif event.type in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            func(event.button, event.x, event.y)
        elif event.type is EventType.MOTION_NOTIFY:
            func(event.x, event.y)
        elif event.type is EventType.EXPOSE:
            if event.count == 0:
                func()
        else:
            func()


class EventLoop:
    """Holds the open windows and delivers queued events to them."""

    def __init__(self) -> None:
        self._windows: list[Window] = []
        self._queue: deque[Event] = deque()
        self._loop_hook: Optional[Callable[[], object]] = None
        self._ended = False

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, most recently created first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of events waiting in the queue."""
        return len(self._queue)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is queued at once."""
        window = Window(width, height, title)
        self._windows.insert(0, window)
        self._queue.append(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; events still queued for it are then ignored."""
        if not self._is_open(window):
            raise ValueError(f"window {window.title!r} is not open")
        self._windows = [w for w in self._windows if w is not window]

    def loop_hook(self, func: Optional[Callable[[], object]]) -> None:
        """Call ``func()`` each time the queue has been drained."""
        self._loop_hook = func

    def post(self, event: Event) -> None:
        """Queue ``event`` for delivery by :meth:`run`."""
        self._queue.append(event)

    def run(self) -> None:
        """Deliver events until no window is left or :meth:`end` is called.

        Without a loop hook the loop returns once the queue is empty, since no
        more events can arrive; with one it keeps calling the hook.
        """
        while self._windows and not self._ended:
            while not self._ended and self._queue:
                event = self._queue.popleft()
                if event.window is not None and self._is_open(event.window):
                    event.window.dispatch(event)
            if self._ended:
                break
            if self._loop_hook is None:
                break
            self._loop_hook()

    def end(self) -> None:
        """Make :meth:`run` return after the event being handled."""
        self._ended = True

    def _is_open(self, window: Window) -> bool:
        return any(w is window for w in self._windows)