"""Level-gated difficulty policy for declension drills.

Levels unlock cases and article classes cumulatively:

    level  cases                 article classes
    1      Nom                   definite
    2      + Akk                 + indefinite
    3      + Dat                 + zero article
    4      + Gen
    5-6    all, weighted towards Dat/Gen
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from languages.german.declension import ArticleClass, Case

MIN_LEVEL = 1
MAX_LEVEL = 6
WEIGHTED_FROM_LEVEL = 5

_CASE_UNLOCKS: tuple[tuple[int, Case], ...] = (
    (1, Case.NOMINATIVE),
    (2, Case.ACCUSATIVE),
    (3, Case.DATIVE),
    (4, Case.GENITIVE),
)

_ARTICLE_UNLOCKS: tuple[tuple[int, ArticleClass], ...] = (
    (1, ArticleClass.DEFINITE),
    (2, ArticleClass.INDEFINITE),
    (3, ArticleClass.ZERO),
)

HARD_CASE_WEIGHTS: Mapping[Case, float] = MappingProxyType({
    Case.NOMINATIVE: 0.3,
    Case.ACCUSATIVE: 0.8,
    Case.DATIVE: 1.5,
    Case.GENITIVE: 2.0,
})


def clamp_level(level: int, max_level: int = MAX_LEVEL) -> int:
    return max(MIN_LEVEL, min(max_level, int(level)))


@dataclass(frozen=True, slots=True)
class DifficultyProfile:
    level: int
    allowed_cases: tuple[Case, ...]
    allowed_article_classes: tuple[ArticleClass, ...]
    case_weights: Mapping[Case, float] = field(default_factory=dict)

    def weight(self, case: Case) -> float:
        return self.case_weights.get(case, 1.0)

    def filter_cases(self, enabled: frozenset[Case]) -> tuple[Case, ...]:
        """Level cases the caller left enabled; the level's first case if none."""
        cases = tuple(c for c in self.allowed_cases if c in enabled)
        return cases or self.allowed_cases[:1]

    def filter_article_classes(self, enabled: frozenset[ArticleClass]) -> tuple[ArticleClass, ...]:
        """Level article classes the caller left enabled; the level's first if none."""
        classes = tuple(a for a in self.allowed_article_classes if a in enabled)
        return classes or self.allowed_article_classes[:1]


def difficulty_for_level(level: int) -> DifficultyProfile:
    """Build the profile for a level, clamped to 1-6."""
    level = clamp_level(level)
    cases = tuple(c for unlock, c in _CASE_UNLOCKS if level >= unlock)
    classes = tuple(a for unlock, a in _ARTICLE_UNLOCKS if level >= unlock)
    weights = HARD_CASE_WEIGHTS if level >= WEIGHTED_FROM_LEVEL else {c: 1.0 for c in cases}
    return DifficultyProfile(level, cases, classes, weights)
