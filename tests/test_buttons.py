from ohmscope.buttons import EDGE_FALL, EDGE_RISE, Button
from ohmscope.config import BUTTON_A_PIN, BUTTON_DEBOUNCE_US


def test_press_after_interval_is_latched_once():
    button = Button()
    assert button.on_edge(BUTTON_A_PIN, EDGE_FALL, BUTTON_DEBOUNCE_US + 1) is True
    assert button.consume() is True
    assert button.consume() is False


def test_press_within_initial_interval_ignored():
    button = Button()
    assert button.on_edge(BUTTON_A_PIN, EDGE_FALL, BUTTON_DEBOUNCE_US) is False
    assert button.consume() is False


def test_other_pin_ignored():
    button = Button()
    assert button.on_edge(BUTTON_A_PIN + 1, EDGE_FALL, BUTTON_DEBOUNCE_US + 1) is False
    assert button.pressed is False


def test_rising_edge_ignored():
    button = Button()
    assert button.on_edge(BUTTON_A_PIN, EDGE_RISE, BUTTON_DEBOUNCE_US + 1) is False
    assert button.consume() is False


def test_combined_events_with_fall_accepted():
    button = Button()
    assert button.on_edge(BUTTON_A_PIN, EDGE_FALL | EDGE_RISE, BUTTON_DEBOUNCE_US + 1)
    assert button.pressed is True


def test_bounce_rejected_then_later_press_accepted():
    button = Button(pin=3, debounce_us=100)
    assert button.on_edge(3, EDGE_FALL, 1000)
    assert not button.on_edge(3, EDGE_FALL, 1050)
    assert button.consume() is True
    assert button.on_edge(3, EDGE_FALL, 1101)
    assert button.consume() is True