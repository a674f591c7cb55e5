from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional
import json
from kivy.logger import Logger
from fayin.models.card import Card
from fayin.settings import RES_DIR


class CardFormatError(ValueError):
    pass


def _str_field(record: dict, key: str) -> str:
    if key not in record:
        raise CardFormatError(f"missing field '{key}'")
    val = record[key]
    if not isinstance(val, str):
        raise CardFormatError(f"field '{key}' must be a string, got {type(val).__name__}")
    return val


def _str_list_field(record: dict, key: str) -> tuple[str, ...]:
    if key not in record:
        raise CardFormatError(f"missing field '{key}'")
    val = record[key]
    if not isinstance(val, list) or not all(isinstance(x, str) for x in val):
        raise CardFormatError(f"field '{key}' must be a list of strings")
    return tuple(val)


def parse_card(record) -> Card:
    if not isinstance(record, dict):
        raise CardFormatError(f"card record must be an object, got {type(record).__name__}")
    # zusätzliche Keys werden ignoriert, examples/markedLetters werden nicht abgeglichen
    return Card(
        phonetic=_str_field(record, "phonetic"),
        examples=_str_list_field(record, "examples"),
        marked_letters=_str_list_field(record, "markedLetters"),
        audio_filename=_str_field(record, "audioFilename"),
    )


def parse_cards(data) -> list[Card]:
    if not isinstance(data, list):
        raise CardFormatError(f"card data must be a list, got {type(data).__name__}")
    out = []
    for i, record in enumerate(data):
        try:
            out.append(parse_card(record))
        except CardFormatError as e:
            raise CardFormatError(f"record {i}: {e}") from e
    return out


def find_asset(asset_name: str, search_dirs: Optional[Iterable[Path]] = None) -> Optional[Path]:
    if not asset_name:
        return None
    filename = asset_name if asset_name.endswith(".json") else f"{asset_name}.json"
    candidates = [Path(d) / filename for d in (search_dirs if search_dirs is not None else (RES_DIR,))]
    for p in candidates:
        if p.is_file():
            return p
    return None


def load_cards(asset_name: str, search_dirs: Optional[Iterable[Path]] = None) -> list[Card]:
    """Load all cards of a bundled JSON asset.

    Returns an empty list on any failure: the app shows an empty deck as the
    completion screen, so nothing is raised here.
    """
    try:
        path = find_asset(asset_name, search_dirs)
        if path is None:
            Logger.warning(f"Fayin: card asset '{asset_name}' not found")
            return []
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        cards = parse_cards(data)
    except Exception as e:
        # z.B. OSError (Dateiname zu lang), JSONDecodeError, CardFormatError, RecursionError
        Logger.warning(f"Fayin: could not load cards for '{str(asset_name)[:80]}': {e}")
        return []
    Logger.info(f"Fayin: loaded {len(cards)} cards from {path.name}")
    return cards
