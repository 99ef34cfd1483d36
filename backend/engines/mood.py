"""Konjunktiv I (indirect speech) question generator."""
import random

from core.logging import engine_logger
from engines.difficulty import clamp_level
from engines.questions import MoodDrill
from engines.randomness import default_rng
from languages.german.lexicon import Verb
from languages.german.mood import (
    CHILD_ROLES,
    COPULA_DISTRACTORS,
    DIMINUTIVE_SUFFIXES,
    FEMININE_ROLES,
    MAX_MOOD_LEVEL,
    MOOD_POOLS,
    SPEAKERS,
    MoodScenario,
)

log = engine_logger()


def reporting_pronoun(speaker: str) -> str:
    """Pronoun that reports the speaker: Sie for feminine roles, Es for children, else Er."""
    words = speaker.lower().split()
    if not words:
        return "Er"
    article, role = words[0], words[-1]
    if article == "die" or role in FEMININE_ROLES or (role.endswith("in") and article != "der"):
        return "Sie"
    if article == "das" or role in CHILD_ROLES or role.endswith(DIMINUTIVE_SUFFIXES):
        return "Es"
    return "Er"


def mood_options(verb: Verb) -> list[str]:
    """Correct subjunctive plus the indicative trap and copula surface forms."""
    options = [verb.subjunctive]
    if verb.indicative != verb.subjunctive:
        options.append(verb.indicative)
    copula = COPULA_DISTRACTORS.get(verb.infinitive)
    if copula and copula not in options:
        options.append(copula)
    return options


class MoodGenerator:
    """Picks a reported-speech scenario for a level and builds the round."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or default_rng()

    def generate(self, level: int) -> MoodDrill:
        level = clamp_level(level, MAX_MOOD_LEVEL)
        scenario: MoodScenario = self._rng.choice(MOOD_POOLS[level])
        speaker = self._rng.choice(SPEAKERS)

        options = mood_options(scenario.verb)
        self._rng.shuffle(options)

        question = MoodDrill(
            prompt=f"{speaker} sagt: „{scenario.direct}“",
            verb=scenario.verb,
            speaker=speaker,
            reporting_pronoun=reporting_pronoun(speaker),
            subject_pronoun=scenario.subject_pronoun,
            remainder=scenario.remainder,
            expected_form=scenario.verb.subjunctive,
            options=tuple(options),
            pattern=scenario.pattern,
            level=level,
        )
        log.debug("mood_question_generated", infinitive=scenario.verb.infinitive, speaker=speaker, level=level)
        return question
