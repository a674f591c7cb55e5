from kivy.uix.boxlayout import BoxLayout
from kivy.uix.anchorlayout import AnchorLayout
from kivy.uix.label import Label
from kivy.graphics import Color, Rectangle
from kivy.core.text import LabelBase
from kivy.logger import Logger
from kivy.metrics import sp
from fayin.ui.widgets import RoundedButton as Button, CardStack
from fayin.models.deck import Deck
from fayin.persistence.card_loader import load_cards
from fayin.services.audio import AudioPlayer
from fayin import settings


class CompletionView(BoxLayout):
    def __init__(self, on_again, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.spacing = 16
        self.padding = 24
        msg = Label(text=settings.TEXT_DONE, font_size=sp(28), bold=True, color=settings.THEME["text"],
                    halign='center', valign='middle', size_hint=(1, 0.6))
        msg.bind(size=lambda inst, s: setattr(inst, "text_size", (s[0] - 12, None)))
        self.add_widget(msg)
        row = AnchorLayout(anchor_x='center', anchor_y='top', size_hint=(1, 0.4))
        again_btn = Button(text=settings.TEXT_AGAIN, font_size=sp(22), size_hint=(None, None), size=(220, 56),
                           corner_radius=10, background_color=settings.THEME["primary"], color=(1, 1, 1, 1))
        self.again_btn = again_btn
        again_btn.bind(on_release=lambda *_: on_again())
        row.add_widget(again_btn)
        self.add_widget(row)


class StudyScreen(BoxLayout):
    def __init__(self, deck: Deck | None = None, store=None, audio: AudioPlayer | None = None, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.padding = 20
        self.spacing = 12

        with self.canvas.before:
            Color(*settings.THEME["bg"])
            self.rect = Rectangle(size=self.size, pos=self.pos)
        self.bind(size=self._update_rect, pos=self._update_rect)

        self.font_ipa_name = self._register_ipa_font()

        prefs = settings.read_study_prefs(store)
        if deck is None:
            deck = Deck(load_cards(prefs["asset"]), threshold=prefs["swipe_threshold"])
        self.deck = deck
        self.audio = audio or AudioPlayer()

        self.progress_label = Label(text="", font_size=sp(18), size_hint=(1, None), height=40,
                                    color=settings.THEME["muted"])
        self.stack = CardStack(deck=self.deck, play_callback=self.audio.play, ipa_font=self.font_ipa_name,
                               size_hint=(1, None), height=settings.STACK_HEIGHT)
        self.completion = CompletionView(on_again=self.deck.reset)

        self.deck.bind(on_change=lambda *_: self.update_display())
        self.update_display()

    def _update_rect(self, instance, value):
        self.rect.pos = instance.pos
        self.rect.size = instance.size

    def _register_ipa_font(self):
        p = settings.FONT_DIR / settings.IPA_FONT_FILE
        if not p.exists():
            Logger.info(f"Fayin: no IPA font at {p}, using default font")
            return None
        try:
            LabelBase.register(name="IPAFont", fn_regular=str(p))
            return "IPAFont"
        except Exception as e:
            Logger.warning(f"Fayin: IPA font registration failed: {e}")
            return None

    def update_display(self):
        self.clear_widgets()
        if self.deck.is_exhausted():
            self.add_widget(self.completion)
            return
        self.progress_label.text = f"{self.deck.reviewed} / {self.deck.total}"
        self.add_widget(self.progress_label)
        self.add_widget(self.stack)
        # Platzhalter unter dem Stapel
        self.add_widget(BoxLayout())
