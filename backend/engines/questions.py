"""Question, filter and verdict types shared by the drill engines.

Questions are frozen values: one is produced per round and discarded after
it has been checked.
"""
from dataclasses import dataclass
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from core.errors import AppError, Ok, Result, validation_error
from languages.german.declension import ArticleClass, Case, Gender
from languages.german.lexicon import Adjective, Context, Noun, Verb


class QuizMode(str, Enum):
    ADJECTIVE = "adjective"
    ARTICLE = "article_drill"
    MOOD = "konjunktiv_i"


class QuizFilters(BaseModel):
    """Caller toggles for cases, article classes and the drill mode."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    mode: QuizMode = QuizMode.ADJECTIVE
    nom: bool = True
    akk: bool = True
    dat: bool = True
    gen: bool = True
    # Short keys def/indef/none are accepted as well
    definite: bool = Field(default=True, validation_alias=AliasChoices("definite", "def"))
    indefinite: bool = Field(default=True, validation_alias=AliasChoices("indefinite", "indef"))
    zero: bool = Field(default=True, validation_alias=AliasChoices("zero", "none"))

    @classmethod
    def parse(cls, raw: dict | None) -> Result["QuizFilters", AppError]:
        """Validate raw toggle data from a caller."""
        try:
            return Ok(cls.model_validate(raw or {}))
        except ValidationError as e:
            first = e.errors()[0]
            return validation_error(
                f"Invalid quiz filters: {first['msg']}",
                field=".".join(str(p) for p in first["loc"]),
                origin="quiz_filters",
                error_count=e.error_count(),
            )

    @property
    def enabled_cases(self) -> frozenset[Case]:
        toggles = {
            Case.NOMINATIVE: self.nom,
            Case.ACCUSATIVE: self.akk,
            Case.DATIVE: self.dat,
            Case.GENITIVE: self.gen,
        }
        return frozenset(c for c, on in toggles.items() if on)

    @property
    def enabled_article_classes(self) -> frozenset[ArticleClass]:
        toggles = {
            ArticleClass.DEFINITE: self.definite,
            ArticleClass.INDEFINITE: self.indefinite,
            ArticleClass.ZERO: self.zero,
        }
        return frozenset(a for a, on in toggles.items() if on)


@dataclass(frozen=True, slots=True)
class AdjectiveDrill:
    noun: Noun
    adjective: Adjective
    context: Context
    article_class: ArticleClass
    case: Case
    expected_article: str
    expected_suffix: str

    @property
    def mode(self) -> QuizMode:
        return QuizMode.ADJECTIVE

    @property
    def full_adjective(self) -> str:
        return self.adjective.word + self.expected_suffix


@dataclass(frozen=True, slots=True)
class ArticleDrill:
    noun: Noun
    expected_article: str

    @property
    def mode(self) -> QuizMode:
        return QuizMode.ARTICLE


@dataclass(frozen=True, slots=True)
class MoodDrill:
    prompt: str
    verb: Verb
    speaker: str
    reporting_pronoun: str  # Resolved from the speaker: Er / Sie / Es
    subject_pronoun: str    # Subject inside the reported clause
    remainder: str
    expected_form: str
    options: tuple[str, ...]
    pattern: str
    level: int

    @property
    def mode(self) -> QuizMode:
        return QuizMode.MOOD

    @property
    def reported_template(self) -> str:
        return f"{self.reporting_pronoun} sagt, {self.subject_pronoun} ___ {self.remainder}."

    @property
    def reported_sentence(self) -> str:
        return f"{self.reporting_pronoun} sagt, {self.subject_pronoun} {self.expected_form} {self.remainder}."


Question = AdjectiveDrill | ArticleDrill | MoodDrill


@dataclass(frozen=True, slots=True)
class SubmittedAnswer:
    article: str | None = None
    suffix: str | None = None
    form: str | None = None


@dataclass(frozen=True, slots=True)
class ExplanationKeys:
    case: Case
    gender: Gender
    article_class: ArticleClass

    def to_dict(self) -> dict:
        return {
            "case": self.case.name.lower(),
            "gender": self.gender.name.lower(),
            "articleClass": self.article_class.name.lower(),
        }


@dataclass(frozen=True, slots=True)
class Verdict:
    """Machine-checkable outcome of one round; callers render the prose."""
    correct: bool
    article_correct: bool | None = None
    suffix_correct: bool | None = None
    expected_article: str | None = None
    expected_suffix: str | None = None
    expected_form: str | None = None
    explanation_keys: ExplanationKeys | None = None
    feedback_key: str | None = None


def question_to_dict(question: Question) -> dict:
    """Plain-data view of a question (camelCase keys)."""
    match question:
        case AdjectiveDrill():
            return {
                "mode": question.mode.value,
                "noun": question.noun.word,
                "gender": question.noun.gender.name.lower(),
                "nounMeaning": question.noun.meaning,
                "adjective": question.adjective.word,
                "context": question.context.text,
                "contextKey": question.context.meaning_key,
                "case": question.case.name.lower(),
                "articleClass": question.article_class.name.lower(),
                "expectedArticle": question.expected_article,
                "expectedSuffix": question.expected_suffix,
                "fullAdjective": question.full_adjective,
            }
        case ArticleDrill():
            return {
                "mode": question.mode.value,
                "noun": question.noun.word,
                "gender": question.noun.gender.name.lower(),
                "nounMeaning": question.noun.meaning,
                "expectedArticle": question.expected_article,
            }
        case MoodDrill():
            return {
                "mode": question.mode.value,
                "prompt": question.prompt,
                "speaker": question.speaker,
                "reportingPronoun": question.reporting_pronoun,
                "subjectPronoun": question.subject_pronoun,
                "target": question.reported_template,
                "infinitive": question.verb.infinitive,
                "expectedForm": question.expected_form,
                "options": list(question.options),
                "pattern": question.pattern,
                "level": question.level,
            }


def verdict_to_dict(verdict: Verdict) -> dict:
    data = {
        "correct": verdict.correct,
        "artCorrect": verdict.article_correct,
        "adjCorrect": verdict.suffix_correct,
        "correctArt": verdict.expected_article,
        "correctAdjSuffix": verdict.expected_suffix,
        "correctForm": verdict.expected_form,
        "feedbackKey": verdict.feedback_key,
        "explanationKeys": verdict.explanation_keys.to_dict() if verdict.explanation_keys else None,
    }
    return {k: v for k, v in data.items() if v is not None}
