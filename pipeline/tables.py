"""
Static lookup tables used by the prompt compiler.

Length tiers map to a sentence-count descriptor and an output token budget.
Language codes map to a display name and a directive written in that
language. Adding a language or tier is a table edit, not a code change.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class LengthTier:
    descriptor: str
    max_output_tokens: int


@dataclass(frozen=True)
class LanguageEntry:
    display_name: str
    instruction: str


LENGTH_TABLE: Mapping[str, LengthTier] = MappingProxyType({
    "short": LengthTier(descriptor="brief (3-4 sentences)", max_output_tokens=400),
    "medium": LengthTier(descriptor="moderate (5-7 sentences)", max_output_tokens=700),
    "long": LengthTier(descriptor="detailed (8-10 sentences)", max_output_tokens=1100),
})

LANGUAGE_TABLE: Mapping[str, LanguageEntry] = MappingProxyType({
    "en": LanguageEntry("English", "Write the email in English."),
    "hi": LanguageEntry("Hindi", "ईमेल हिंदी में लिखें।"),
    "es": LanguageEntry("Spanish", "Escribe el correo electrónico en español."),
    "fr": LanguageEntry("French", "Rédige l'e-mail en français."),
    "de": LanguageEntry("German", "Schreibe die E-Mail auf Deutsch."),
})

DEFAULT_LENGTH_TIER = "medium"

# Sampling constants. Higher than the provider default for more natural text.
TEMPERATURE = 0.9
TOP_P = 0.95


@dataclass(frozen=True)
class ConfigurationTables:
    """Read-only bundle of the tables, injectable for tests."""

    lengths: Mapping[str, LengthTier] = field(default_factory=lambda: LENGTH_TABLE)
    languages: Mapping[str, LanguageEntry] = field(default_factory=lambda: LANGUAGE_TABLE)
    temperature: float = TEMPERATURE
    top_p: float = TOP_P

    def length_tier(self, length: str) -> LengthTier:
        """Look up a length tier; unknown tiers use the medium entry."""
        tier = self.lengths.get((length or "").lower())
        if tier is None:
            tier = self.lengths[DEFAULT_LENGTH_TIER]
        return tier

    def language_directive(self, code: str) -> str:
        """
        Return the language directive for a code.

        Known codes get their localized instruction followed by the English
        name. Unknown codes are passed through inside an English directive so
        the model still receives an explicit target language.
        """
        entry = self.languages.get((code or "").lower())
        if entry is None:
            return f"Write the email in the language identified by the code '{code}'."
        if entry.display_name == "English":
            return entry.instruction
        return f"{entry.instruction} (Write the email in {entry.display_name}.)"


DEFAULT_TABLES = ConfigurationTables()
