from __future__ import annotations
from pathlib import Path
from kivy.logger import Logger

# Things that can be changed

RES_DIR = Path(__file__).resolve().parent / "res"
AUDIO_DIR = RES_DIR / "audio"
FONT_DIR = RES_DIR / "fonts"
IPA_FONT_FILE = "DoulosSIL-Regular.ttf"

DECK_ASSET = "Phonetic"        # res/Phonetic.json
SWIPE_THRESHOLD = 200          # vertical drag distance (px) for dismiss / recall
PREFS_FILE = "fayin_prefs.json"

WINDOW_SIZE = (420, 760)
CARD_SIZE = (350, 250)
STACK_HEIGHT = 300
STACK_OFFSET = 4               # px between stacked cards
STACK_VISIBLE = 4              # filler cards drawn under the top card

FLIP_DURATION = 0.35
SNAP_BACK_DURATION = 0.2

THEME = {
    "bg": (0.95, 0.95, 0.97, 1),
    "card": (1, 1, 1, 1),
    "shadow": (0.5, 0.5, 0.5, 0.35),
    "text": (0, 0, 0, 1),
    "muted": (0.45, 0.45, 0.5, 1),
    "primary": (0.0, 0.48, 1.0, 1),
    "highlight": (1.0, 0.0, 0.0, 1),
}

TEXT_DONE = "Congratulations, you finished this session!"
TEXT_AGAIN = "Study again"


def read_study_prefs(store) -> dict:
    """Read ``swipe_threshold`` / ``asset`` from the "study" entry of a JsonStore.

    Missing or invalid values fall back to the defaults.
    """
    prefs = {"swipe_threshold": SWIPE_THRESHOLD, "asset": DECK_ASSET}
    if store is None:
        return prefs
    try:
        if not store.exists("study"):
            return prefs
        entry = store.get("study")
    except Exception as e:
        Logger.warning(f"Fayin: preferences unreadable ({e}), using defaults")
        return prefs

    thr = entry.get("swipe_threshold")
    if isinstance(thr, (int, float)) and not isinstance(thr, bool) and thr >= 1:
        prefs["swipe_threshold"] = thr
    elif thr is not None:
        Logger.warning(f"Fayin: ignoring invalid swipe_threshold {thr!r}")

    asset = entry.get("asset")
    if isinstance(asset, str) and asset.strip():
        prefs["asset"] = asset.strip()
    elif asset is not None:
        Logger.warning(f"Fayin: ignoring invalid asset {asset!r}")
    return prefs
