from engines.answers import check_answer, check_spoken_answer
from engines.compatibility import compatible_adjectives, compatible_contexts
from engines.declension import DeclensionGenerator, fallback_question
from engines.difficulty import DifficultyProfile, difficulty_for_level
from engines.mood import MoodGenerator, reporting_pronoun
from engines.progression import LevelProgress, parse_progress, record_answer
from engines.questions import (
    AdjectiveDrill,
    ArticleDrill,
    MoodDrill,
    Question,
    QuizFilters,
    QuizMode,
    SubmittedAnswer,
    Verdict,
)
from engines.session import GeneratorSession, generate_question

__all__ = [
    "check_answer",
    "check_spoken_answer",
    "compatible_adjectives",
    "compatible_contexts",
    "DeclensionGenerator",
    "fallback_question",
    "DifficultyProfile",
    "difficulty_for_level",
    "MoodGenerator",
    "reporting_pronoun",
    "LevelProgress",
    "parse_progress",
    "record_answer",
    "AdjectiveDrill",
    "ArticleDrill",
    "MoodDrill",
    "Question",
    "QuizFilters",
    "QuizMode",
    "SubmittedAnswer",
    "Verdict",
    "GeneratorSession",
    "generate_question",
]
