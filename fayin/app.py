from pathlib import Path
from kivy.app import App
from kivy.storage.jsonstore import JsonStore
from kivy.logger import Logger
from fayin.screens.study import StudyScreen
from fayin import settings


class FayinApp(App):
    def build(self):
        self.title = "Fayin"
        from kivy.core.window import Window
        Window.size = settings.WINDOW_SIZE
        store = None
        try:
            store = JsonStore(str(Path(self.user_data_dir) / settings.PREFS_FILE))
        except Exception as e:
            Logger.warning(f"Fayin: preferences not available ({e})")
        root = StudyScreen(store=store)
        self.audio = root.audio
        return root

    def on_stop(self):
        audio = getattr(self, "audio", None)
        if audio:
            audio.stop()


def main():
    FayinApp().run()


if __name__ == "__main__":
    main()
