from __future__ import annotations
from typing import Iterable, Optional
from kivy.event import EventDispatcher
from kivy.properties import BoundedNumericProperty
from fayin.models.card import Card
from fayin.settings import SWIPE_THRESHOLD

DISMISS = "dismiss"
RECALL = "recall"
RESET = "reset"


class Deck(EventDispatcher):
    """Two card stacks (top = last element) and the swipe transitions between them.

    ``advance`` takes a signed vertical distance in screen convention
    (negative = up). Strong up moves the top active card to ``dismissed``,
    strong down brings the last dismissed card back. Everything else is
    ignored. Listeners bind to ``on_change`` which fires once per real
    transition with the action name.
    """

    __events__ = ("on_change",)

    threshold = BoundedNumericProperty(SWIPE_THRESHOLD, min=1)

    def __init__(self, cards: Iterable[Card] = (), **kwargs):
        super().__init__(**kwargs)
        self.active: list[Card] = list(cards)
        self.dismissed: list[Card] = []

    # ---- Abfragen ----
    def top(self) -> Optional[Card]:
        return self.active[-1] if self.active else None

    def is_exhausted(self) -> bool:
        return not self.active

    @property
    def remaining(self) -> int:
        return len(self.active)

    @property
    def reviewed(self) -> int:
        return len(self.dismissed)

    @property
    def total(self) -> int:
        return len(self.active) + len(self.dismissed)

    def cards(self) -> list[Card]:
        return self.active + self.dismissed

    # ---- Übergänge ----
    def advance(self, direction: float) -> Optional[str]:
        if direction <= -self.threshold and self.active:
            self.dismissed.append(self.active.pop())
            self.dispatch("on_change", DISMISS)
            return DISMISS
        if direction >= self.threshold and self.dismissed:
            self.active.append(self.dismissed.pop())
            self.dispatch("on_change", RECALL)
            return RECALL
        return None

    def reset(self) -> bool:
        if self.active or not self.dismissed:
            return False
        # zuletzt entfernte Karte liegt danach oben, Ladereihenfolge ist damit umgedreht
        self.active = list(self.dismissed)
        self.dismissed = []
        self.dispatch("on_change", RESET)
        return True

    def on_change(self, action):
        pass
