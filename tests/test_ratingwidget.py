"""Tests for the imgui rating wrapper, driven by a stand-in imgui frame."""

import importlib
import sys
import types

import pytest

from fracrating.common.structs import Interaction


class FrameDrawList:
    def __init__(self):
        self.flags = 0b111
        self.triangles = []
        self.clips = []

    def add_triangle_filled(self, *args):
        self.triangles.append(args)

    def push_clip_rect(self, x1, y1, x2, y2, intersect=False):
        self.clips.append((x1, y1, x2, y2))

    def pop_clip_rect(self):
        pass


class Frame:
    """Per-frame input state the stand-in imgui reports."""

    def __init__(self):
        self.hovered = False
        self.clicked = False
        self.focused = False
        self.mouse_x = -100.0
        self.pressed = set()
        self.disabled_pushes = 0
        self.draw_list = FrameDrawList()


KEY_RIGHT, KEY_LEFT = 262, 263


@pytest.fixture
def frame():
    return Frame()


@pytest.fixture
def ratingwidget(frame, monkeypatch):
    fake_imgui = types.ModuleType("imgui")
    fake_imgui.MOUSE_CURSOR_HAND = 7
    fake_imgui.dummy = lambda *_: None
    fake_imgui.get_cursor_screen_pos = lambda: (0.0, 0.0)
    fake_imgui.invisible_button = lambda *_: frame.clicked
    fake_imgui.is_item_hovered = lambda: frame.hovered
    fake_imgui.is_item_clicked = lambda: frame.clicked
    fake_imgui.is_item_focused = lambda: frame.focused
    fake_imgui.get_io = lambda: types.SimpleNamespace(mouse_pos=types.SimpleNamespace(x=frame.mouse_x, y=0.0))
    fake_imgui.set_mouse_cursor = lambda *_: None
    fake_imgui.is_key_pressed = lambda key, repeat=False: key in frame.pressed
    fake_imgui.get_window_draw_list = lambda: frame.draw_list
    def push_item_flag(flag, enabled):
        frame.disabled_pushes += 1
    fake_imgui.internal = types.SimpleNamespace(
        ITEM_DISABLED=1 << 2,
        push_item_flag=push_item_flag,
        pop_item_flag=lambda: None,
    )
    fake_glfw = types.ModuleType("glfw")
    fake_glfw.KEY_RIGHT = KEY_RIGHT
    fake_glfw.KEY_LEFT = KEY_LEFT
    monkeypatch.setitem(sys.modules, "imgui", fake_imgui)
    monkeypatch.setitem(sys.modules, "glfw", fake_glfw)
    monkeypatch.delitem(sys.modules, "fracrating.modules.ratingwidget", raising=False)
    module = importlib.import_module("fracrating.modules.ratingwidget")
    yield module
    sys.modules.pop("fracrating.modules.ratingwidget", None)


class TestGetController:

    def test_one_controller_per_id(self, ratingwidget):
        first = ratingwidget.get_controller("a", count=5)
        assert ratingwidget.get_controller("a", count=5) is first
        assert ratingwidget.get_controller("b", count=5) is not first

    def test_unchanged_options_keep_config(self, ratingwidget):
        controller = ratingwidget.get_controller("a", count=5, color="#FF0000")
        config = controller.config
        ratingwidget.get_controller("a", count=5, color="#FF0000")
        assert controller.config is config

    def test_changed_options_reconfigure(self, ratingwidget):
        controller = ratingwidget.get_controller("a", count=5)
        controller.pointer_enter(4)
        ratingwidget.get_controller("a", count=3)
        assert controller.config.count == 3
        assert controller.state is Interaction.Idle


class TestRatingWidget:

    def test_idle_frame(self, ratingwidget, frame):
        assert ratingwidget.ratingwidget("r", 2) == (False, 2)
        # Two full stars drawn on top of five empty ones
        assert len(frame.draw_list.clips) == 2

    def test_hover_previews_without_commit(self, ratingwidget, frame):
        frame.hovered = True
        frame.mouse_x = 3 * 28 + 5
        assert ratingwidget.ratingwidget("r", 1) == (False, 1)
        assert ratingwidget.controllers["r"].hover_value == 4
        assert len(frame.draw_list.clips) == 4

    def test_leaving_clears_preview(self, ratingwidget, frame):
        frame.hovered = True
        frame.mouse_x = 3 * 28 + 5
        ratingwidget.ratingwidget("r", 1)
        frame.hovered = False
        ratingwidget.ratingwidget("r", 1)
        assert ratingwidget.controllers["r"].state is Interaction.Idle

    def test_click_commits(self, ratingwidget, frame):
        received = []
        frame.hovered = frame.clicked = True
        frame.mouse_x = 2 * 28 + 5
        assert ratingwidget.ratingwidget("r", 1, on_change=received.append) == (True, 3)
        assert received == [3]

    def test_key_chains_on_same_frame_commit(self, ratingwidget, frame):
        frame.hovered = frame.clicked = frame.focused = True
        frame.mouse_x = 1 * 28 + 5
        frame.pressed = {KEY_RIGHT}
        assert ratingwidget.ratingwidget("r", 4) == (True, 3)

    def test_key_at_bound(self, ratingwidget, frame):
        frame.focused = True
        frame.pressed = {KEY_RIGHT}
        assert ratingwidget.ratingwidget("r", 5) == (False, 5)
        frame.pressed = {KEY_LEFT}
        assert ratingwidget.ratingwidget("r", 5) == (True, 4)

    def test_read_only(self, ratingwidget, frame):
        frame.hovered = frame.clicked = frame.focused = True
        frame.mouse_x = 5
        frame.pressed = {KEY_RIGHT}
        assert ratingwidget.ratingwidget("r", 2, read_only=True) == (False, 2)
        assert frame.disabled_pushes == 1
        assert ratingwidget.controllers["r"].state is Interaction.Idle

    def test_zero_count(self, ratingwidget, frame):
        assert ratingwidget.ratingwidget("r", 2, count=0) == (False, 2)
        assert frame.draw_list.triangles == []

    def test_callback_error_releases_controller(self, ratingwidget, frame):
        def explode(value):
            raise RuntimeError(value)
        frame.hovered = frame.clicked = True
        frame.mouse_x = 5
        with pytest.raises(RuntimeError):
            ratingwidget.ratingwidget("r", 3, on_change=explode)
        assert ratingwidget.controllers["r"].on_change is None
