from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, NamedTuple


class Segment(NamedTuple):
    content: str
    is_marked: bool = False


@dataclass(frozen=True, slots=True)
class Card:
    phonetic: str
    examples: tuple[str, ...] = ()
    marked_letters: tuple[str, ...] = ()
    audio_filename: str = ""

    def example_pairs(self) -> Iterator[tuple[str, str]]:
        # ungleiche Längen: auf die kürzere Liste kürzen
        return zip(self.examples, self.marked_letters)
