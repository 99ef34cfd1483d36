"""German language module implementation."""
from core.errors import Err, Ok
from core.logging import lexicon_logger
from languages.base import GrammarConfig, LanguageModule
from .declension import ArticleClass, declension_pattern, declension_table
from .grammar import GERMAN_GRAMMAR_CONFIG
from .lexicon import ADJECTIVES, CONTEXTS, NOUNS, validate_lexicon
from .mood import MOOD_POOLS, mood_reference_table

log = lexicon_logger()


class GermanModule(LanguageModule):
    """German module: declension drills and Konjunktiv I reporting."""

    __slots__ = ()

    def __init__(self):
        match validate_lexicon():
            case Ok(_):
                log.debug(
                    "lexicon_loaded",
                    nouns=len(NOUNS),
                    adjectives=len(ADJECTIVES),
                    contexts=len(CONTEXTS),
                    mood_scenarios=sum(len(p) for p in MOOD_POOLS.values()),
                )
            case Err(errors):
                for error in errors:
                    log.error("lexicon_invariant_violated", message=error.message, **error.metadata)

    @property
    def code(self) -> str:
        return "de"

    @property
    def name(self) -> str:
        return "German"

    @property
    def native_name(self) -> str:
        return "Deutsch"

    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for callers."""
        return GERMAN_GRAMMAR_CONFIG

    def get_declension_tables(self) -> dict:
        """Weak, mixed and strong tables keyed by pattern name."""
        return {declension_pattern(a): declension_table(a) for a in ArticleClass}

    def get_mood_reference_table(self) -> dict:
        """Konjunktiv I endings; each call returns a fresh copy."""
        return mood_reference_table()
