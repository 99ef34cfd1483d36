"""Declension Question Generator

Builds article and adjective-ending drills from the German lexicon:
noun -> compatible adjective -> compatible context (weighted by case) ->
article class -> table lookup. Sampling is bounded; when the active filters
cannot be satisfied a fixed fallback round is returned instead.
"""
import random
from collections.abc import Callable, Sequence
from typing import TypeVar

from core.config import settings
from core.logging import engine_logger
from engines.compatibility import compatible_adjectives, compatible_contexts
from engines.difficulty import DifficultyProfile, difficulty_for_level
from engines.questions import AdjectiveDrill, ArticleDrill, QuizFilters
from engines.randomness import default_rng
from languages.german.declension import ArticleClass, Case, lookup
from languages.german.lexicon import (
    ADJECTIVES,
    CONTEXTS,
    FALLBACK_ADJECTIVE,
    FALLBACK_CONTEXT,
    FALLBACK_NOUN,
    NOUNS,
    Adjective,
    Context,
    Noun,
)

log = engine_logger()

T = TypeVar("T")


def weighted_choice(items: Sequence[T], weight: Callable[[T], float], rng: random.Random) -> T:
    """Linear-scan weighted draw over a non-empty sequence.

    If rounding keeps the walk from stopping inside the loop, the last item wins.
    """
    total = sum(weight(item) for item in items)
    remaining = rng.random() * total
    for item in items:
        w = weight(item)
        if remaining < w:
            return item
        remaining -= w
    return items[-1]


def fallback_question() -> AdjectiveDrill:
    """Fixed round: definite nominative 'Das ist der gute Mann'."""
    rule = lookup(ArticleClass.DEFINITE, Case.NOMINATIVE, FALLBACK_NOUN.gender)
    return AdjectiveDrill(
        noun=FALLBACK_NOUN,
        adjective=FALLBACK_ADJECTIVE,
        context=FALLBACK_CONTEXT,
        article_class=ArticleClass.DEFINITE,
        case=Case.NOMINATIVE,
        expected_article=rule.article,
        expected_suffix=rule.suffix,
    )


class DeclensionGenerator:
    """Generates adjective-ending and article drills."""

    __slots__ = ("_rng", "_max_attempts", "_max_resamples", "_nouns", "_adjectives", "_contexts")

    def __init__(
        self,
        rng: random.Random | None = None,
        max_attempts: int | None = None,
        max_resamples: int | None = None,
        nouns: Sequence[Noun] = NOUNS,
        adjectives: Sequence[Adjective] = ADJECTIVES,
        contexts: Sequence[Context] = CONTEXTS,
    ):
        self._rng = rng or default_rng()
        self._max_attempts = max_attempts if max_attempts is not None else settings.GENERATOR_MAX_ATTEMPTS
        self._max_resamples = max_resamples if max_resamples is not None else settings.GENERATOR_MAX_RESAMPLES
        self._nouns = nouns
        self._adjectives = adjectives
        self._contexts = contexts

    def article_drill(self) -> ArticleDrill:
        """Definite nominative article for a random noun."""
        noun = self._rng.choice(self._nouns)
        rule = lookup(ArticleClass.DEFINITE, Case.NOMINATIVE, noun.gender)
        return ArticleDrill(noun=noun, expected_article=rule.article)

    def adjective_drill(self, filters: QuizFilters, level: int) -> AdjectiveDrill:
        """Build one adjective-ending drill. Never raises.

        Every failed attempt is a resample, so the loop ends after
        min(max_attempts, max_resamples + 1) consecutive failures. The attempt
        cap only binds when it is set below that resample limit.

        Args:
            filters: Caller toggles, intersected with what the level allows
            level: Learner level, clamped to 1-6
        """
        profile = difficulty_for_level(level)
        cases = profile.filter_cases(filters.enabled_cases)
        classes = profile.filter_article_classes(filters.enabled_article_classes)

        resamples = 0
        for attempt in range(1, self._max_attempts + 1):
            question = self._attempt(profile, cases, classes)
            if question is not None:
                log.debug(
                    "question_generated",
                    noun=question.noun.word,
                    case=question.case.name,
                    article_class=question.article_class.name,
                    level=profile.level,
                    attempt=attempt,
                )
                return question
            resamples += 1
            if resamples > self._max_resamples:
                break

        log.warning(
            "question_fallback",
            level=profile.level,
            cases=[c.name for c in cases],
            resamples=resamples,
        )
        return fallback_question()

    def _attempt(
        self,
        profile: DifficultyProfile,
        cases: tuple[Case, ...],
        classes: tuple[ArticleClass, ...],
    ) -> AdjectiveDrill | None:
        """One sampling pass; None when the noun fits no allowed context."""
        noun = self._rng.choice(self._nouns)
        adjective = self._rng.choice(compatible_adjectives(noun, self._adjectives))

        contexts = compatible_contexts(noun, cases, self._contexts)
        if not contexts:
            return None

        context = weighted_choice(contexts, lambda c: profile.weight(c.case), self._rng)
        article_class = self._rng.choice(classes)
        rule = lookup(article_class, context.case, noun.gender)

        return AdjectiveDrill(
            noun=noun,
            adjective=adjective,
            context=context,
            article_class=article_class,
            case=context.case,
            expected_article=rule.article,
            expected_suffix=rule.suffix,
        )
