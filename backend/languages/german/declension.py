"""German article and adjective-ending table.

Three ending families share one table:
- weak endings after the definite article (der/die/das)
- mixed endings after ein/kein (plural uses the kein- forms)
- strong endings with no article, mirroring the definite article's ending
"""
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class Case(IntEnum):
    NOMINATIVE = 0
    ACCUSATIVE = 1
    DATIVE = 2
    GENITIVE = 3


class Gender(IntEnum):
    MASCULINE = 0
    FEMININE = 1
    NEUTER = 2
    PLURAL = 3  # Table slot only, not a grammatical gender


class ArticleClass(IntEnum):
    DEFINITE = 0
    INDEFINITE = 1
    ZERO = 2


@dataclass(frozen=True, slots=True)
class DeclensionRule:
    """Article text and adjective suffix for one (article class, case, gender) cell."""
    article: str
    suffix: str


def _row(*cells: tuple[str, str]) -> tuple[DeclensionRule, ...]:
    return tuple(DeclensionRule(art, adj) for art, adj in cells)


# _TABLE[article_class][case][gender], gender order: masc, fem, neut, pl
_TABLE: tuple[tuple[tuple[DeclensionRule, ...], ...], ...] = (
    # Definite (weak)
    (
        _row(("der", "e"), ("die", "e"), ("das", "e"), ("die", "en")),
        _row(("den", "en"), ("die", "e"), ("das", "e"), ("die", "en")),
        _row(("dem", "en"), ("der", "en"), ("dem", "en"), ("den", "en")),
        _row(("des", "en"), ("der", "en"), ("des", "en"), ("der", "en")),
    ),
    # Indefinite (mixed)
    (
        _row(("ein", "er"), ("eine", "e"), ("ein", "es"), ("keine", "en")),
        _row(("einen", "en"), ("eine", "e"), ("ein", "es"), ("keine", "en")),
        _row(("einem", "en"), ("einer", "en"), ("einem", "en"), ("keinen", "en")),
        _row(("eines", "en"), ("einer", "en"), ("eines", "en"), ("keiner", "en")),
    ),
    # No article (strong)
    (
        _row(("", "er"), ("", "e"), ("", "es"), ("", "e")),
        _row(("", "en"), ("", "e"), ("", "es"), ("", "e")),
        _row(("", "em"), ("", "er"), ("", "em"), ("", "en")),
        # Masc/neut genitive take -en because the noun itself carries -s
        _row(("", "en"), ("", "er"), ("", "en"), ("", "er")),
    ),
)

DECLENSION_PATTERNS: Mapping[ArticleClass, str] = MappingProxyType({
    ArticleClass.DEFINITE: "weak",
    ArticleClass.INDEFINITE: "mixed",
    ArticleClass.ZERO: "strong",
})


def lookup(article_class: ArticleClass, case: Case, gender: Gender) -> DeclensionRule:
    """Return the rule for a cell. Total over all 48 enum combinations."""
    return _TABLE[article_class][case][gender]


def declension_pattern(article_class: ArticleClass) -> str:
    """Name of the ending family used after this article class."""
    return DECLENSION_PATTERNS[article_class]


def declension_table(article_class: ArticleClass) -> dict[str, dict[str, dict[str, str]]]:
    """Nested case -> gender -> {article, suffix} view for reference tables."""
    return {
        case.name.lower(): {
            gender.name.lower(): {
                "article": lookup(article_class, case, gender).article,
                "suffix": lookup(article_class, case, gender).suffix,
            }
            for gender in Gender
        }
        for case in Case
    }
