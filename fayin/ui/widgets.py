from kivy.uix.button import Button
from kivy.uix.floatlayout import FloatLayout
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.label import Label
from kivy.properties import NumericProperty, BooleanProperty, ObjectProperty, ListProperty
from kivy.graphics import Color, RoundedRectangle, PushMatrix, PopMatrix, Scale
from kivy.animation import Animation
from kivy.metrics import sp
from fayin.models.highlight import highlight, to_markup
from fayin import settings


class RoundedButton(Button):
    corner_radius = NumericProperty(12)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.background_normal = ""
        self.background_down = ""
        self._fill = tuple(self.background_color)
        # eigener Hintergrund statt des Standard-Buttonbilds
        self.background_color = (0, 0, 0, 0)
        with self.canvas.before:
            self._bg_color_instr = Color(*self._fill)
            self._bg_rect = RoundedRectangle(pos=self.pos, size=self.size, radius=[self.corner_radius])
        self.bind(pos=self._update_canvas, size=self._update_canvas,
                  state=self._update_canvas, corner_radius=self._update_canvas)

    def _update_canvas(self, *_):
        self._bg_rect.pos = self.pos
        self._bg_rect.size = self.size
        self._bg_rect.radius = [self.corner_radius]
        r, g, b, a = self._fill
        if self.state == "down":
            self._bg_color_instr.rgba = (r * 0.8, g * 0.8, b * 0.8, a)
        else:
            self._bg_color_instr.rgba = self._fill


class CardView(FloatLayout):
    """One card: phonetic label and Play button in front, highlighted examples behind.

    A tap flips the card (``revealed``); dragging is handled by ``CardStack``.
    """

    card = ObjectProperty(None)
    revealed = BooleanProperty(False)
    interactive = BooleanProperty(False)
    flip_scale = NumericProperty(1.0)
    corner_radius = NumericProperty(25)
    ipa_font = ObjectProperty(None, allownone=True)
    play_callback = ObjectProperty(None, allownone=True)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        with self.canvas.before:
            PushMatrix()
            self._scale = Scale(1, 1, 1, origin=self.center)
            Color(*settings.THEME["shadow"])
            self._shadow = RoundedRectangle(pos=(self.x, self.y - 5), size=self.size, radius=[self.corner_radius])
            Color(*settings.THEME["card"])
            self._surface = RoundedRectangle(pos=self.pos, size=self.size, radius=[self.corner_radius])
        with self.canvas.after:
            PopMatrix()
        self.bind(pos=self._update_canvas, size=self._update_canvas, flip_scale=self._update_canvas)
        self.bind(card=self._build_face, revealed=self._build_face)
        self._build_face()

    def _update_canvas(self, *_):
        self._scale.origin = self.center
        self._scale.x = self.flip_scale
        self._shadow.pos = (self.x, self.y - 5)
        self._shadow.size = self.size
        self._surface.pos = self.pos
        self._surface.size = self.size

    # ---- Inhalt ----
    def _build_face(self, *_):
        self.clear_widgets()
        if self.card is None:
            return
        if self.revealed:
            self.add_widget(self._build_back())
        else:
            self.add_widget(self._build_front())

    def _build_front(self):
        box = BoxLayout(orientation="vertical", padding=16, spacing=8,
                        size_hint=(1, 1), pos_hint={"x": 0, "y": 0})
        lbl = Label(text=self.card.phonetic, font_size=sp(30), color=settings.THEME["text"],
                    size_hint=(1, 0.7))
        if self.ipa_font:
            lbl.font_name = self.ipa_font
        box.add_widget(lbl)
        play_btn = RoundedButton(text="Play", font_size=sp(18), size_hint=(None, None),
                                 size=(96, 40), pos_hint={"center_x": 0.5},
                                 background_color=settings.THEME["primary"], color=(1, 1, 1, 1))
        play_btn.bind(on_release=lambda *_: self._play())
        box.add_widget(play_btn)
        return box

    def _build_back(self):
        grid = GridLayout(cols=1, spacing=6, padding=(16, 12),
                          size_hint=(1, 1), pos_hint={"x": 0, "y": 0})
        for example, marker in self.card.example_pairs():
            markup = to_markup(highlight(example, marker), color=settings.THEME["highlight"],
                               base_color=settings.THEME["text"])
            lbl = Label(text=markup, markup=True, font_size=sp(26),
                        halign="center", valign="middle")
            lbl.bind(size=lambda inst, s: setattr(inst, "text_size", s))
            grid.add_widget(lbl)
        return grid

    def _play(self):
        if self.play_callback and self.card is not None:
            self.play_callback(self.card.audio_filename)

    # ---- Umdrehen ----
    def flip(self):
        Animation.cancel_all(self, "flip_scale")
        half = settings.FLIP_DURATION / 2.0
        squash = Animation(flip_scale=0.0, duration=half, t="in_quad")

        def _swap_and_expand(*_):
            self.revealed = not self.revealed
            Animation(flip_scale=1.0, duration=half, t="out_back").start(self)
        squash.bind(on_complete=_swap_and_expand)
        squash.start(self)

    def on_touch_down(self, touch):
        if not self.interactive or not self.collide_point(*touch.pos):
            return False
        # Play-Button geht vor
        if super().on_touch_down(touch):
            return True
        touch.ud["card_tap"] = self
        return False


class CardStack(FloatLayout):
    """Stack of the active cards; only the top one takes touches.

    On release a vertical drag is reported as ``deck.advance(-dy)``: Kivy
    counts y upwards, the deck expects negative = up.
    """

    deck = ObjectProperty(None)
    play_callback = ObjectProperty(None, allownone=True)
    ipa_font = ObjectProperty(None, allownone=True)
    drag_offset = ListProperty([0, 0])

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._views: list[CardView] = []
        self._top_view = None
        self.bind(deck=self._on_deck, size=self._layout, pos=self._layout)
        if self.deck is not None:
            self._on_deck(self, self.deck)

    def _on_deck(self, _inst, deck):
        if deck is None:
            return
        deck.bind(on_change=lambda *_: self.refresh())
        self.refresh()

    def refresh(self, *_):
        self.clear_widgets()
        self._views = []
        self._top_view = None
        self.drag_offset = [0, 0]
        if self.deck is None:
            return
        visible = self.deck.active[-(settings.STACK_VISIBLE + 1):]
        for i, card in enumerate(visible):
            is_top = (i == len(visible) - 1)
            view = CardView(card=card, interactive=is_top, ipa_font=self.ipa_font,
                            play_callback=self.play_callback, size_hint=(None, None), size=settings.CARD_SIZE)
            self._views.append(view)
            self.add_widget(view)
            if is_top:
                self._top_view = view
        self._layout()

    def _rest_pos(self, depth: int):
        w, h = settings.CARD_SIZE
        return (self.center_x - w / 2.0, self.center_y - h / 2.0 - depth * settings.STACK_OFFSET)

    def _layout(self, *_):
        n = len(self._views)
        for i, view in enumerate(self._views):
            depth = n - 1 - i
            x, y = self._rest_pos(depth)
            if view is self._top_view:
                x += self.drag_offset[0]
                y += self.drag_offset[1]
            view.pos = (x, y)

    def on_drag_offset(self, *_):
        self._layout()

    def on_touch_down(self, touch):
        top = self._top_view
        if top is None or not top.collide_point(*touch.pos):
            return super().on_touch_down(touch)
        top.on_touch_down(touch)
        if touch.ud.get("card_tap") is not top:
            return True
        touch.grab(self)
        Animation.cancel_all(self, "drag_offset")
        return True

    def on_touch_move(self, touch):
        if touch.grab_current is not self:
            return super().on_touch_move(touch)
        self.drag_offset = [touch.x - touch.ox, touch.y - touch.oy]
        return True

    def on_touch_up(self, touch):
        if touch.grab_current is not self:
            return super().on_touch_up(touch)
        touch.ungrab(self)
        dx, dy = touch.x - touch.ox, touch.y - touch.oy
        if abs(dx) < 10 and abs(dy) < 10:
            self.drag_offset = [0, 0]
            if self._top_view is not None:
                self._top_view.flip()
            return True
        # refresh() über on_change setzt den Offset bei einem Übergang zurück
        if self.deck.advance(-dy) is None:
            Animation(drag_offset=[0, 0], duration=settings.SNAP_BACK_DURATION, t="out_quad").start(self)
        return True
