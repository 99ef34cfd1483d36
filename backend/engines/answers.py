"""Answer checking for declension and Konjunktiv I drills.

Verdicts carry expected values and explanation keys only; wording is left to
the caller's string tables.
"""
import re

from core.logging import engine_logger
from engines.questions import (
    AdjectiveDrill,
    ArticleDrill,
    ExplanationKeys,
    MoodDrill,
    Question,
    SubmittedAnswer,
    Verdict,
)
from languages.german.declension import ArticleClass, Case

log = engine_logger()


def check_answer(question: Question, submitted: SubmittedAnswer) -> Verdict:
    """Compare a submission with the rule-derived expectation of its question."""
    match question:
        case ArticleDrill():
            verdict = _check_article_drill(question, submitted)
        case AdjectiveDrill():
            verdict = _check_adjective_drill(question, submitted)
        case MoodDrill():
            verdict = Verdict(
                correct=submitted.form == question.expected_form,
                expected_form=question.expected_form,
            )
        case _:
            raise TypeError(f"Unsupported question type: {type(question).__name__}")
    log.debug("answer_checked", mode=question.mode.value, correct=verdict.correct)
    return verdict


def _check_article_drill(question: ArticleDrill, submitted: SubmittedAnswer) -> Verdict:
    correct = submitted.article == question.expected_article
    return Verdict(
        correct=correct,
        article_correct=correct,
        expected_article=question.expected_article,
        explanation_keys=ExplanationKeys(Case.NOMINATIVE, question.noun.gender, ArticleClass.DEFINITE),
    )


def _check_adjective_drill(question: AdjectiveDrill, submitted: SubmittedAnswer) -> Verdict:
    expected = question.expected_article
    # Zero-article rounds accept an empty or missing article
    article_ok = submitted.article == expected or (expected == "" and not submitted.article)
    suffix_ok = submitted.suffix == question.expected_suffix
    return Verdict(
        correct=article_ok and suffix_ok,
        article_correct=article_ok,
        suffix_correct=suffix_ok,
        expected_article=expected,
        expected_suffix=question.expected_suffix,
        explanation_keys=ExplanationKeys(question.case, question.noun.gender, question.article_class),
    )


def check_spoken_answer(question: MoodDrill, transcript: str) -> Verdict:
    """Check a recognised utterance for the expected Konjunktiv I form.

    Feedback keys on a miss:
        indicative_used: the indicative form was said instead
        copula_indicative: 'ist' was said where 'sei' belongs
        subjunctive_missing: neither form was recognised
    """
    words = set(re.findall(r"\w+", transcript.lower()))
    expected = question.expected_form.lower()
    indicative = question.verb.indicative.lower()

    if expected in words:
        return Verdict(correct=True, expected_form=question.expected_form)

    if indicative != expected and indicative in words:
        feedback = "indicative_used"
    elif expected == "sei" and "ist" in words:
        feedback = "copula_indicative"
    else:
        feedback = "subjunctive_missing"
    log.debug("spoken_answer_rejected", expected=question.expected_form, feedback=feedback)
    return Verdict(correct=False, expected_form=question.expected_form, feedback_key=feedback)
