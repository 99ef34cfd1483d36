"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """Configuration for a grammatical case."""
    id: str
    label: str
    hint: str  # Question words that identify the case


@dataclass(frozen=True, slots=True)
class GenderConfig:
    """Configuration for a grammatical gender."""
    id: str
    label: str
    short: str  # Abbreviation used in tables


@dataclass(frozen=True, slots=True)
class ArticleClassConfig:
    """Configuration for an article class and the ending family it selects."""
    id: str
    label: str
    pattern: str


@dataclass(frozen=True, slots=True)
class GrammarConfig:
    """Language grammar configuration for callers."""
    cases: tuple[CaseConfig, ...] = ()
    genders: tuple[GenderConfig, ...] = ()
    article_classes: tuple[ArticleClassConfig, ...] = ()
    has_declension: bool = False
    has_subjunctive: bool = False

    def to_dict(self) -> dict:
        """Convert to plain dict."""
        return {
            "cases": [{"id": c.id, "label": c.label, "hint": c.hint} for c in self.cases],
            "genders": [{"id": g.id, "label": g.label, "short": g.short} for g in self.genders],
            "articleClasses": [
                {"id": a.id, "label": a.label, "pattern": a.pattern} for a in self.article_classes
            ],
            "hasDeclension": self.has_declension,
            "hasSubjunctive": self.has_subjunctive,
        }


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'de')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for callers."""
        ...

    def get_declension_tables(self) -> dict:
        """Get article/ending reference tables. Override if language has declension."""
        return {}

    def get_mood_reference_table(self) -> dict | None:
        """Get the indirect-speech ending table. Override if language has one."""
        return None
