from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional
import threading
from kivy.logger import Logger
from fayin.settings import AUDIO_DIR, RES_DIR


class AudioPlayer:
    """Plays the audio clip of a card. Failures are swallowed and only logged at debug level."""

    def __init__(self, search_dirs: Optional[Iterable[Path]] = None, gain: float = 1.0):
        self.search_dirs = [Path(d) for d in (search_dirs if search_dirs is not None else (AUDIO_DIR, RES_DIR))]
        self.gain = gain
        self._thread: Optional[threading.Thread] = None

    def resolve(self, filename: str | None) -> Optional[Path]:
        if not filename:
            return None
        for d in self.search_dirs:
            p = d / filename
            try:
                if p.is_file():
                    return p
            except (OSError, ValueError):
                # zu langer Name, Nullbyte o.ä.: gilt als nicht vorhanden
                continue
        return None

    def play(self, filename: str | None):
        path = self.resolve(filename)
        if path is None:
            Logger.debug(f"Audio: no file for {filename!r}")
            return
        t = threading.Thread(target=self._play_path, args=(path,), daemon=True)
        self._thread = t
        t.start()

    def _play_path(self, path: Path):
        try:
            import numpy as np
            import sounddevice as sd
            import soundfile as sf
            data, sr = sf.read(str(path), dtype="float32")
            data = np.asarray(data, dtype=np.float32)
            if self.gain != 1.0:
                data = np.clip(data * self.gain, -1.0, 1.0)
            try:
                sd.stop()
            except Exception:
                pass
            sd.play(data, sr, blocking=False)
        except Exception as e:
            Logger.debug(f"Audio: playback of {path.name} failed: {e}")

    def stop(self):
        try:
            import sounddevice as sd
            sd.stop()
        except Exception:
            pass
