import pytest

from fractol.hooks import Event, EventLoop, EventMask, EventType

ESC = 0xFF1B


def test_hooks_from_demo_program():
    loop = EventLoop()
    win1 = loop.new_window(242, 242, "Title1")
    win2 = loop.new_window(242, 242, "Title2")
    win3 = loop.new_window(242, 242, "Title3")
    log = []

    def key_win1(key):
        log.append(("key", 1, key))
        if key == ESC:
            loop.end()

    def key_win3(key):
        if key == ESC:
            loop.destroy_window(win3)

    win1.expose_hook(lambda: log.append(("expose", 1)))
    win1.mouse_hook(lambda b, x, y: log.append(("mouse", 1, b, x, y)))
    win1.key_hook(key_win1)
    win2.expose_hook(lambda: log.append(("expose", 2)))
    win3.key_hook(key_win3)
    win3.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION,
              lambda x, y: log.append(("motion", x, y)))

    loop.post(Event(EventType.MOTION_NOTIFY, win3, x=10, y=20))
    loop.post(Event(EventType.KEY_RELEASE, win3, key=ESC))
    loop.post(Event(EventType.MOTION_NOTIFY, win3, x=1, y=1))
    loop.post(Event(EventType.BUTTON_PRESS, win1, button=1, x=5, y=6))
    loop.post(Event(EventType.KEY_RELEASE, win1, key=ESC))
    loop.post(Event(EventType.BUTTON_PRESS, win1, button=3, x=0, y=0))
    loop.run()

    assert log == [
        ("expose", 1),
        ("expose", 2),
        ("motion", 10, 20),
        ("mouse", 1, 1, 5, 6),
        ("key", 1, ESC),
    ]
    assert loop.windows == (win2, win1)
    assert loop.pending == 1


def test_mouse_hook_replaces_window_like_new_win_demo():
    loop = EventLoop()
    state = {}

    def gere_mouse(button, x, y):
        loop.destroy_window(state["win1"])
        state["win1"] = loop.new_window(120, 80, "new win")
        state["win1"].mouse_hook(gere_mouse)

    state["win1"] = loop.new_window(300, 300, "win1")
    win2 = loop.new_window(600, 600, "win2")
    state["win1"].mouse_hook(gere_mouse)
    win2.mouse_hook(gere_mouse)
    first = state["win1"]
    loop.post(Event(EventType.BUTTON_PRESS, first, button=1))
    loop.post(Event(EventType.BUTTON_PRESS, first, button=1))
    loop.run()

    assert first not in loop.windows
    assert len(loop.windows) == 2
    assert loop.windows[0].title == "new win"
    assert (loop.windows[0].width, loop.windows[0].height) == (120, 80)


def test_event_mask_combines_hook_masks():
    loop = EventLoop()
    win = loop.new_window(10, 10, "w")
    assert win.event_mask() == 0
    win.key_hook(lambda key: None)
    win.mouse_hook(lambda b, x, y: None)
    win.expose_hook(lambda: None)
    assert win.event_mask() == (
        EventMask.KEY_RELEASE | EventMask.BUTTON_PRESS | EventMask.EXPOSURE
    )


def test_key_hook_ignores_key_press_events():
    loop = EventLoop()
    win = loop.new_window(10, 10, "w")
    keys = []
    win.key_hook(keys.append)
    win.dispatch(Event(EventType.KEY_PRESS, win, key=97))
    win.dispatch(Event(EventType.KEY_RELEASE, win, key=98))
    assert keys == [98]


def test_expose_only_when_count_is_zero():
    loop = EventLoop()
    win = loop.new_window(10, 10, "w")
    calls = []
    win.expose_hook(lambda: calls.append(1))
    win.dispatch(Event(EventType.EXPOSE, win, count=2))
    assert calls == []
    win.dispatch(Event(EventType.EXPOSE, win, count=0))
    assert calls == [1]


def test_close_request_calls_destroy_hook():
    loop = EventLoop()
    win = loop.new_window(10, 10, "w")
    win.hook(EventType.DESTROY_NOTIFY, EventMask.STRUCTURE_NOTIFY,
             lambda: loop.destroy_window(win))
    loop.post(Event(EventType.CLIENT_MESSAGE, win, close_request=True))
    loop.run()
    assert loop.windows == ()


def test_loop_hook_runs_until_end():
    loop = EventLoop()
    win = loop.new_window(10, 10, "w")
    ticks = []

    def tick():
        ticks.append(len(ticks))
        if len(ticks) == 3:
            loop.end()

    loop.loop_hook(tick)
    loop.run()
    assert ticks == [0, 1, 2]
    assert loop.windows == (win,)
    assert loop.pending == 0


def test_run_without_windows_leaves_queue():
    loop = EventLoop()
    win = loop.new_window(10, 10, "w")
    loop.destroy_window(win)
    loop.post(Event(EventType.KEY_RELEASE, win, key=1))
    loop.run()
    assert loop.pending == 2


def test_destroy_unknown_window_raises():
    loop = EventLoop()
    other = EventLoop().new_window(5, 5, "other")
    with pytest.raises(ValueError):
        loop.destroy_window(other)


def test_hook_rejects_unknown_event_type():
    win = EventLoop().new_window(5, 5, "w")
    with pytest.raises(ValueError):
        win.hook(99, 0, lambda: None)