"""Generator session: the caller-owned state of one drill sequence.

Holds the random source, filters, level and the question of the current
round. Each round is independent of the previous ones.
"""
import random
from dataclasses import dataclass, field

from core.errors import Err, Ok
from core.logging import engine_logger
from engines.answers import check_answer
from engines.declension import DeclensionGenerator
from engines.mood import MoodGenerator
from engines.questions import (
    Question,
    QuizFilters,
    QuizMode,
    SubmittedAnswer,
    Verdict,
    question_to_dict,
    verdict_to_dict,
)
from engines.randomness import default_rng

log = engine_logger()


def generate_question(
    filters: QuizFilters,
    level: int,
    rng: random.Random | None = None,
) -> Question:
    """Build one question for the filters' mode. Total: never raises."""
    rng = rng or default_rng()
    match filters.mode:
        case QuizMode.ARTICLE:
            return DeclensionGenerator(rng).article_drill()
        case QuizMode.MOOD:
            return MoodGenerator(rng).generate(level)
        case _:
            return DeclensionGenerator(rng).adjective_drill(filters, level)


@dataclass
class GeneratorSession:
    """Explicit replacement for a module-level engine: one per learner/drill."""
    filters: QuizFilters = field(default_factory=QuizFilters)
    level: int = 1
    rng: random.Random = field(default_factory=default_rng)
    current: Question | None = None

    @classmethod
    def seeded(cls, seed: int, **kwargs) -> "GeneratorSession":
        return cls(rng=random.Random(seed), **kwargs)

    def next_question(self) -> Question:
        self.current = generate_question(self.filters, self.level, self.rng)
        return self.current

    def check(self, submitted: SubmittedAnswer) -> Verdict | None:
        """Check against the current question; None before the first round."""
        if self.current is None:
            return None
        return check_answer(self.current, submitted)


def generate_question_dict(raw_filters: dict | None, level: int, seed: int | None = None) -> dict:
    """Generate a question from raw dict data (caller-friendly).

    Malformed filters fall back to the defaults so generation stays total.
    """
    match QuizFilters.parse(raw_filters):
        case Ok(filters):
            pass
        case Err(error):
            log.warning("filters_rejected", code=error.code.name, message=error.message, **error.metadata)
            filters = QuizFilters()
    rng = random.Random(seed) if seed is not None else default_rng()
    question = generate_question(filters, level, rng)
    return question_to_dict(question)


def check_answer_dict(question: Question, submitted: dict) -> dict:
    """Check raw submitted values ({article, suffix, form}) and return plain data."""
    answer = SubmittedAnswer(
        article=submitted.get("article"),
        suffix=submitted.get("suffix"),
        form=submitted.get("form"),
    )
    return verdict_to_dict(check_answer(question, answer))
