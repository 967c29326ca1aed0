from unittest.mock import patch

import pytest

from flapbird.collision import Sprite
from flapbird.inputs import MouseButton, is_clicked

LEFT_DOWN = (True, False, False)
RIGHT_DOWN = (False, False, True)
NONE_DOWN = (False, False, False)


def _click(sprite, pressed, pos, button=MouseButton.LEFT):
    with patch("pygame.mouse.get_pressed", return_value=pressed), patch(
        "pygame.mouse.get_pos", return_value=pos
    ):
        return is_clicked(sprite, button)


@pytest.mark.parametrize(
    "pos, expected",
    [((10, 20), True), ((39, 59), True), ((40, 20), False), ((10, 60), False), ((9, 20), False)],
)
def test_click_inside_truncated_area(pos, expected):
    sprite = Sprite(30, 40, x=10.7, y=20.2)
    assert _click(sprite, LEFT_DOWN, pos) is expected


def test_no_button_means_no_click():
    assert _click(Sprite(30, 40), NONE_DOWN, (5, 5)) is False


def test_other_button_does_not_count():
    sprite = Sprite(30, 40)
    assert _click(sprite, RIGHT_DOWN, (5, 5)) is False
    assert _click(sprite, RIGHT_DOWN, (5, 5), MouseButton.RIGHT) is True