"""
Optional humanizing decorator for fallback skeletons.

Adds contractions and an occasional filler phrase to the skeleton's own
sentences (opening, body and closing) before the email is rendered. The
caller's personal note, the subject line, the greeting and the sign-off
block are never modified. Contractions and fillers are English, so only
skeletons for the languages in `languages` are touched.

All randomness comes from a private random.Random seeded per call, so the
same seed and skeleton always give the same output.
"""

import random
import re
from dataclasses import replace
from typing import Iterable, Sequence, Tuple

from .templates import FallbackSkeleton

CONTRACTIONS: Tuple[Tuple[str, str], ...] = (
    (r"\bI am\b", "I'm"),
    (r"\bI would\b", "I'd"),
    (r"\bI have\b", "I've"),
    (r"\bdo not\b", "don't"),
    (r"\bit is\b", "it's"),
    (r"\bthat is\b", "that's"),
)

FILLERS: Tuple[str, ...] = (
    "Honestly,",
    "Anyway,",
    "Just a quick note,",
    "By the way,",
)

HUMANIZED_LANGUAGES: Tuple[str, ...] = ("en",)


class Humanizer:
    """Seeded mutation of a FallbackSkeleton, applied before rendering."""

    def __init__(
        self,
        seed: int = 0,
        filler_probability: float = 0.35,
        fillers: Sequence[str] = FILLERS,
        languages: Iterable[str] = HUMANIZED_LANGUAGES,
    ):
        self.seed = seed
        self.filler_probability = filler_probability
        self.fillers = tuple(fillers)
        self.languages = frozenset(language.lower() for language in languages)

    def __call__(self, skeleton: FallbackSkeleton, language: str) -> FallbackSkeleton:
        if (language or "").lower() not in self.languages:
            return skeleton

        rng = random.Random(self.seed)

        # opening and closing start a paragraph; body follows the opening
        return replace(
            skeleton,
            opening=self._humanize_sentence(skeleton.opening, rng),
            body=self._contract(skeleton.body),
            closing=self._humanize_sentence(skeleton.closing, rng),
        )

    def _contract(self, text: str) -> str:
        for pattern, replacement in CONTRACTIONS:
            text = re.sub(pattern, replacement, text)
        return text

    def _humanize_sentence(self, text: str, rng: random.Random) -> str:
        text = self._contract(text)

        if text[:1].isupper() and rng.random() < self.filler_probability:
            filler = rng.choice(self.fillers)
            first_word = text.split(" ", 1)[0]
            # keep "I" and "I'm" capitalized
            if first_word != "I" and not first_word.startswith("I'"):
                text = text[0].lower() + text[1:]
            text = f"{filler} {text}"

        return text
