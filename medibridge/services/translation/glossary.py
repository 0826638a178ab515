# =============================================================================
# services/translation/glossary.py
# =============================================================================

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ...core.exceptions import GlossaryError

logger = logging.getLogger(__name__)

# English -> Spanish medical terms substituted before remote translation
DEFAULT_MEDICAL_GLOSSARY = {
    "headache": "cefalea",
    "fever": "fiebre",
    "chest pain": "dolor de pecho",
    "blood pressure": "presión arterial",
    "allergy": "alergia",
    "antibiotics": "antibióticos",
    "appointment": "cita médica",
    "dizziness": "mareo",
    "nausea": "náuseas",
    "prescription": "receta médica",
}


class Glossary:
    """
    Immutable, ordered term -> translation mapping.

    Substitution is deliberately aggressive: keys are matched as literal
    substrings regardless of word boundaries, in declaration order, each
    pass operating on the output of the previous one.
    """

    __slots__ = ("_entries", "_index", "_patterns")

    def __init__(self, entries):
        pairs = []
        index = {}
        for term, translation in entries:
            if not isinstance(term, str) or not term.strip():
                raise GlossaryError(f"Glossary term must be a non-empty string, got {term!r}")
            if not isinstance(translation, str) or not translation.strip():
                raise GlossaryError(f"Glossary translation for {term!r} must be a non-empty string")
            key = term.lower()
            if key in index:
                raise GlossaryError(f"Duplicate glossary term {term!r}")
            index[key] = translation
            pairs.append((term, translation))

        self._entries: Tuple[Tuple[str, str], ...] = tuple(pairs)
        self._index: Dict[str, str] = index
        self._patterns = tuple(
            (re.compile(re.escape(term), re.IGNORECASE), translation)
            for term, translation in self._entries
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Glossary":
        if not isinstance(mapping, Mapping):
            raise GlossaryError("Glossary must be a mapping of term to translation")
        return cls(mapping.items())

    @classmethod
    def from_file(cls, path) -> "Glossary":
        """Load a glossary from a JSON object file"""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise GlossaryError(f"Could not read glossary file {path}: {e}")
        return cls.from_mapping(data)

    def __setattr__(self, name, value):
        if hasattr(self, "_patterns"):
            raise AttributeError("Glossary is immutable")
        object.__setattr__(self, name, value)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._entries)

    def __contains__(self, term) -> bool:
        return isinstance(term, str) and term.lower() in self._index

    def __repr__(self) -> str:
        return f"Glossary({len(self)} terms)"

    def lookup(self, word: str) -> Optional[str]:
        """Exact case-insensitive lookup of a whole key"""
        return self._index.get(word.lower())

    def substitute(self, text: str) -> str:
        for pattern, translation in self._patterns:
            text = pattern.sub(lambda _match, value=translation: value, text)
        return text


def load_glossary(settings) -> Glossary:
    """Build the process-wide glossary, from GLOSSARY_PATH if configured"""
    if settings.glossary_path:
        glossary = Glossary.from_file(settings.glossary_path)
        logger.info(f"📖 Loaded glossary from {settings.glossary_path} ({len(glossary)} terms)")
    else:
        glossary = Glossary.from_mapping(DEFAULT_MEDICAL_GLOSSARY)
        logger.info(f"📖 Using built-in medical glossary ({len(glossary)} terms)")
    return glossary
