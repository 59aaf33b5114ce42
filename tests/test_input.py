import pytest

from spacefighter.input import (
    Button,
    ButtonState,
    GamePadState,
    Key,
    MouseButton,
)
from spacefighter.vector2 import Vector2

BUTTON_FIELDS = [
    (Button.A, "buttons", "a"),
    (Button.B, "buttons", "b"),
    (Button.X, "buttons", "x"),
    (Button.Y, "buttons", "y"),
    (Button.START, "buttons", "start"),
    (Button.BACK, "buttons", "back"),
    (Button.LEFT_STICK, "buttons", "left_stick"),
    (Button.LEFT_SHOULDER, "buttons", "left_shoulder"),
    (Button.RIGHT_STICK, "buttons", "right_stick"),
    (Button.RIGHT_SHOULDER, "buttons", "right_shoulder"),
    (Button.DPAD_UP, "dpad", "up"),
    (Button.DPAD_DOWN, "dpad", "down"),
    (Button.DPAD_LEFT, "dpad", "left"),
    (Button.DPAD_RIGHT, "dpad", "right"),
]


def _press(state, group, name):
    setattr(getattr(state, group), name, ButtonState.PRESSED)


@pytest.mark.parametrize(
    "key, value",
    [
        (Key.A, 1),
        (Key.F1, 47),
        (Key.ESCAPE, 59),
        (Key.INSERT, 76),
        (Key.PAD_SLASH, 86),
        (Key.PRINTSCREEN, 92),
        (Key.LSHIFT, 215),
    ],
)
def test_key_anchor_values(key, value):
    assert Key(value) is key


def test_keys_are_consecutive_within_blocks():
    assert Key(Key.A + 25) is Key.Z
    assert Key(Key.Z + 1) is Key.NUM_0
    assert Key(Key.PAD_0 + 9) is Key.PAD_9
    assert Key(Key.CAPSLOCK + 1) is Key.MAX
    assert Key(Key.ESCAPE + 16) is Key.SPACE


def test_mouse_buttons_start_at_one():
    assert MouseButton(1) is MouseButton.LEFT
    assert MouseButton(MouseButton.LEFT + 4) is MouseButton.FORWARD
    with pytest.raises(ValueError):
        MouseButton(0)


def test_new_state_has_no_button_down():
    state = GamePadState()
    assert not any(state.is_button_down(button) for button in Button)
    assert all(state.is_button_up(button) for button in Button)


@pytest.mark.parametrize("button, group, name", BUTTON_FIELDS)
def test_is_button_down_reads_matching_field(button, group, name):
    state = GamePadState()
    _press(state, group, name)
    assert state.is_button_down(button)
    assert not state.is_button_up(button)
    down = [b for b in Button if state.is_button_down(b)]
    assert down == [button]


def test_reset_releases_everything_and_zeroes_triggers():
    state = GamePadState(is_connected=True)
    for _, group, name in BUTTON_FIELDS:
        _press(state, group, name)
    state.triggers.left = 0.75
    state.triggers.right = 0.5
    assert all(state.is_button_down(b) for b in Button)

    state.reset()

    assert all(state.is_button_up(b) for b in Button)
    assert state.triggers.left == 0
    assert state.triggers.right == 0
    assert state.is_connected is True


def test_reset_keeps_thumbsticks():
    state = GamePadState()
    state.thumbsticks.left = Vector2(0.5, -0.25)
    state.thumbsticks.right = Vector2(-1.0, 1.0)
    state.reset()
    assert state.thumbsticks.left == Vector2(0.5, -0.25)
    assert state.thumbsticks.right == Vector2(-1.0, 1.0)


def test_states_do_not_share_sub_objects():
    first = GamePadState()
    second = GamePadState()
    first.buttons.a = ButtonState.PRESSED
    assert first.is_button_down(Button.A)
    assert second.is_button_up(Button.A)