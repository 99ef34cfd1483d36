"""Tests for engines/mood.py."""
import random

import pytest

from engines.mood import MoodGenerator, mood_options, reporting_pronoun
from languages.german.lexicon import VERBS
from languages.german.mood import MOOD_POOLS


@pytest.mark.parametrize("speaker,pronoun", [
    ("Die Frau", "Sie"),
    ("Der Polizist", "Er"),
    ("Die Ärztin", "Sie"),
    ("Das Kind", "Es"),
    ("Das Mädchen", "Es"),
    ("Der Lehrer", "Er"),
    ("Lehrerin", "Sie"),
    ("Kätzchen", "Es"),
    ("", "Er"),
])
def test_reporting_pronoun(speaker, pronoun):
    assert reporting_pronoun(speaker) == pronoun


def test_options_for_sein():
    """sei plus the indicative 'bin' and the copula 'ist'."""
    assert mood_options(VERBS["sein"]) == ["sei", "bin", "ist"]


def test_options_for_haben_skip_identical_indicative():
    assert mood_options(VERBS["haben"]) == ["habe", "hat"]


def test_options_for_regular_verb_collide():
    assert mood_options(VERBS["kommen"]) == ["komme"]


def test_options_for_modal():
    assert mood_options(VERBS["können"]) == ["könne", "kann"]


def test_generated_round_matches_scenario():
    gen = MoodGenerator(random.Random(4))
    for level in range(1, 6):
        for _ in range(30):
            q = gen.generate(level)
            assert q.level == level
            assert q.expected_form == q.verb.subjunctive
            assert q.expected_form in q.options
            assert sorted(q.options) == sorted(mood_options(q.verb))
            assert q.prompt.startswith(q.speaker)
            assert q.reporting_pronoun == reporting_pronoun(q.speaker)
            scenario_pronouns = {s.subject_pronoun for s in MOOD_POOLS[level]}
            assert q.subject_pronoun in scenario_pronouns


def test_level_clamped_to_pool_range():
    gen = MoodGenerator(random.Random(0))
    assert gen.generate(6).level == 5
    assert gen.generate(0).level == 1


def test_reported_sentence():
    gen = MoodGenerator(random.Random(12))
    q = gen.generate(1)
    assert "___" in q.reported_template
    assert f" {q.subject_pronoun} {q.expected_form} " in q.reported_sentence
    assert q.reported_sentence.startswith(f"{q.reporting_pronoun} sagt,")


def test_seeded_mood_generation_is_deterministic():
    assert MoodGenerator(random.Random(5)).generate(3) == MoodGenerator(random.Random(5)).generate(3)
