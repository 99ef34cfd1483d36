"""Tests for engines/answers.py."""
import random

import pytest

from engines.answers import check_answer, check_spoken_answer
from engines.declension import DeclensionGenerator, fallback_question
from engines.mood import MoodGenerator
from engines.questions import AdjectiveDrill, ArticleDrill, QuizFilters, SubmittedAnswer
from languages.german.declension import ArticleClass, Case, Gender, lookup
from languages.german.lexicon import ADJECTIVES, CONTEXTS, NOUNS, VERBS

HUND = next(n for n in NOUNS if n.word == "Hund")
SCHNELL = next(a for a in ADJECTIVES if a.word == "schnell")
WEGEN = next(c for c in CONTEXTS if c.text == "Wegen")


def _drill(article_class, case, context):
    rule = lookup(article_class, case, HUND.gender)
    return AdjectiveDrill(HUND, SCHNELL, context, article_class, case, rule.article, rule.suffix)


def _mood_question(infinitive):
    gen = MoodGenerator(random.Random(0))
    for level in range(1, 6):
        for _ in range(200):
            q = gen.generate(level)
            if q.verb.infinitive == infinitive:
                return q
    raise AssertionError(f"no scenario for {infinitive}")


def test_generated_expectations_are_accepted():
    gen = DeclensionGenerator(random.Random(21))
    for _ in range(300):
        q = gen.adjective_drill(QuizFilters(), 6)
        verdict = check_answer(q, SubmittedAnswer(article=q.expected_article, suffix=q.expected_suffix))
        assert verdict.correct
        assert verdict.article_correct and verdict.suffix_correct


def test_wrong_suffix_is_partial():
    q = fallback_question()
    verdict = check_answer(q, SubmittedAnswer(article="der", suffix="en"))
    assert verdict.article_correct is True
    assert verdict.suffix_correct is False
    assert verdict.correct is False
    assert verdict.expected_suffix == "e"


def test_wrong_article_is_partial():
    q = fallback_question()
    verdict = check_answer(q, SubmittedAnswer(article="den", suffix="e"))
    assert (verdict.article_correct, verdict.suffix_correct, verdict.correct) == (False, True, False)


def test_zero_article_accepts_missing_article():
    """Wegen schnellen Hundes: no article, suffix -en."""
    q = _drill(ArticleClass.ZERO, Case.GENITIVE, WEGEN)
    assert (q.expected_article, q.expected_suffix) == ("", "en")
    assert check_answer(q, SubmittedAnswer(article=None, suffix="en")).correct
    assert check_answer(q, SubmittedAnswer(article="", suffix="en")).correct
    assert not check_answer(q, SubmittedAnswer(article="des", suffix="en")).article_correct


def test_missing_article_rejected_when_expected():
    q = _drill(ArticleClass.DEFINITE, Case.GENITIVE, WEGEN)
    assert not check_answer(q, SubmittedAnswer(article=None, suffix="en")).article_correct


def test_explanation_keys():
    q = _drill(ArticleClass.INDEFINITE, Case.GENITIVE, WEGEN)
    keys = check_answer(q, SubmittedAnswer()).explanation_keys
    assert (keys.case, keys.gender, keys.article_class) == (Case.GENITIVE, Gender.MASCULINE, ArticleClass.INDEFINITE)
    assert keys.to_dict() == {"case": "genitive", "gender": "masculine", "articleClass": "indefinite"}


def test_article_drill():
    katze = next(n for n in NOUNS if n.word == "Katze")
    q = ArticleDrill(katze, "die")
    ok = check_answer(q, SubmittedAnswer(article="die"))
    assert ok.correct and ok.expected_article == "die"
    assert ok.explanation_keys.case is Case.NOMINATIVE
    assert ok.explanation_keys.article_class is ArticleClass.DEFINITE
    assert not check_answer(q, SubmittedAnswer(article="der")).correct


def test_mood_choice():
    q = _mood_question("sein")
    assert check_answer(q, SubmittedAnswer(form="sei")).correct
    verdict = check_answer(q, SubmittedAnswer(form="ist"))
    assert not verdict.correct
    assert verdict.expected_form == "sei"


def test_spoken_answer_correct():
    q = _mood_question("sein")
    assert check_spoken_answer(q, "Er sagt, er sei müde").correct


def test_spoken_answer_copula_trap():
    q = _mood_question("sein")
    verdict = check_spoken_answer(q, "Sie sagt, der Bus ist zu spät")
    assert not verdict.correct
    assert verdict.feedback_key == "copula_indicative"


def test_spoken_answer_indicative_trap():
    q = _mood_question("können")
    assert q.verb == VERBS["können"]
    verdict = check_spoken_answer(q, "er sagt, er kann heute nicht kommen")
    assert verdict.feedback_key == "indicative_used"


def test_spoken_answer_missing():
    q = _mood_question("können")
    assert check_spoken_answer(q, "keine Ahnung").feedback_key == "subjunctive_missing"


def test_unknown_question_type_is_rejected():
    with pytest.raises(TypeError, match="Unsupported question type"):
        check_answer(object(), SubmittedAnswer(article="der"))
