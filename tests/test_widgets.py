"""Tests for the swipe wiring in fayin/ui/widgets.py and the restart button.

Touches are plain stand-in objects, so no window is needed.
"""

import pytest
from fayin.models.deck import Deck
from fayin.ui.widgets import CardStack
from fayin.screens.study import CompletionView
from fayin import settings


class FakeTouch:
    """Just enough of a Kivy MotionEvent for widget touch handlers."""

    is_mouse_scrolling = False
    is_double_tap = False
    is_triple_tap = False
    button = "left"

    def __init__(self, x, y):
        self.x = self.ox = x
        self.y = self.oy = y
        self.ud = {}
        self.grab_current = None
        self.grab_list = []

    @property
    def pos(self):
        return (self.x, self.y)

    def grab(self, widget):
        self.grab_list.append(widget)

    def ungrab(self, widget):
        if widget in self.grab_list:
            self.grab_list.remove(widget)

    def move(self, x, y):
        self.x, self.y = x, y


def drag(stack, start, end):
    """Down at ``start``, move to ``end``, release; grabbed widgets get the grab dispatch."""
    touch = FakeTouch(*start)
    stack.on_touch_down(touch)
    touch.move(*end)
    for widget in list(touch.grab_list):
        touch.grab_current = widget
        widget.on_touch_move(touch)
    for widget in list(touch.grab_list):
        touch.grab_current = widget
        widget.on_touch_up(touch)
    touch.grab_current = None
    return touch


@pytest.fixture
def stack_for():
    def _make(deck):
        return CardStack(deck=deck, size=(800, 600), pos=(0, 0))
    return _make


def _grip_point(stack):
    # oberer Kartenbereich, weg vom Play-Button
    return (stack.center_x, stack.center_y + settings.CARD_SIZE[1] / 2.0 - 20)


class TestCardStack:
    """Drags on the top card are mapped onto Deck.advance."""

    def test_only_top_card_is_interactive(self, abc, stack_for):
        stack = stack_for(Deck(abc))
        assert [v.interactive for v in stack._views] == [False, False, True]
        assert stack._top_view.card == abc[-1]

    def test_upward_drag_dismisses(self, abc, card_c, stack_for):
        deck = Deck(abc)
        stack = stack_for(deck)
        x, y = _grip_point(stack)
        drag(stack, (x, y), (x, y + 260))
        assert deck.dismissed == [card_c]
        assert stack._top_view.card == abc[1]

    def test_downward_drag_recalls(self, abc, card_c, stack_for):
        deck = Deck(abc)
        deck.advance(-300)
        stack = stack_for(deck)
        x, y = _grip_point(stack)
        drag(stack, (x, y), (x, y - 260))
        assert deck.dismissed == []
        assert deck.top() == card_c

    def test_short_drag_snaps_back(self, abc, stack_for):
        deck = Deck(abc)
        stack = stack_for(deck)
        x, y = _grip_point(stack)
        drag(stack, (x, y), (x, y + 150))
        assert deck.active == abc
        assert deck.dismissed == []

    def test_tap_flips_without_moving_cards(self, abc, stack_for):
        deck = Deck(abc)
        stack = stack_for(deck)
        flips = []
        stack._top_view.flip = lambda: flips.append(True)
        x, y = _grip_point(stack)
        drag(stack, (x, y), (x + 4, y - 6))
        assert flips == [True]
        assert deck.active == abc
        assert deck.dismissed == []

    def test_touch_outside_top_card_is_ignored(self, abc, stack_for):
        deck = Deck(abc)
        stack = stack_for(deck)
        touch = drag(stack, (5, 5), (5, 400))
        assert touch.grab_list == []
        assert deck.active == abc

    def test_refreshes_on_deck_change(self, abc, stack_for):
        deck = Deck(abc)
        stack = stack_for(deck)
        deck.advance(-300)
        assert len(stack._views) == 2
        deck.advance(-300)
        deck.advance(-300)
        assert stack._views == []
        assert stack._top_view is None


class TestCompletionView:
    """The restart button resets an exhausted deck."""

    def test_again_resets_deck(self, abc):
        deck = Deck(abc)
        for _ in abc:
            deck.advance(-300)
        view = CompletionView(on_again=deck.reset)
        view.again_btn.dispatch("on_release")
        assert deck.active == list(reversed(abc))
        assert deck.dismissed == []
