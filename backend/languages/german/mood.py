"""Konjunktiv I (indirect speech) scenario pools.

Each scenario is a direct statement about a third party and the reported
clause it turns into: "<Reporter> sagt, <subject> <subjunctive> <remainder>."
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .lexicon import VERBS, Verb


@dataclass(frozen=True, slots=True)
class MoodScenario:
    direct: str
    subject_pronoun: str
    verb: Verb
    remainder: str
    pattern: str


def _scenario(direct: str, subject: str, infinitive: str, remainder: str, pattern: str) -> MoodScenario:
    return MoodScenario(direct, subject, VERBS[infinitive], remainder, pattern)


MAX_MOOD_LEVEL = 5

MOOD_POOLS: Mapping[int, tuple[MoodScenario, ...]] = MappingProxyType({
    # sein / haben in the present
    1: (
        _scenario("Der Bus ist zu spät.", "er", "sein", "zu spät", "sein: ist → sei"),
        _scenario("Die Suppe ist kalt.", "sie", "sein", "kalt", "sein: ist → sei"),
        _scenario("Das Wetter ist schön.", "es", "sein", "schön", "sein: ist → sei"),
        _scenario("Der Hund hat Hunger.", "er", "haben", "Hunger", "haben: hat → habe"),
        _scenario("Die Katze hat Durst.", "sie", "haben", "Durst", "haben: hat → habe"),
    ),
    # Regular verbs: stem + -e
    2: (
        _scenario("Der Zug kommt um acht Uhr.", "er", "kommen", "um acht Uhr", "Stamm + -e"),
        _scenario("Die Lehrerin wohnt in Berlin.", "sie", "wohnen", "in Berlin", "Stamm + -e"),
        _scenario("Das Kind spielt im Garten.", "es", "spielen", "im Garten", "Stamm + -e"),
        _scenario("Der Student lernt jeden Tag.", "er", "lernen", "jeden Tag", "Stamm + -e"),
        _scenario("Die Ärztin arbeitet heute lange.", "sie", "arbeiten", "heute lange", "Stamm + -e"),
    ),
    # Modal verbs: infinitive stem, no vowel change
    3: (
        _scenario("Der Chef kann heute nicht kommen.", "er", "können", "heute nicht kommen", "Modalverb: kann → könne"),
        _scenario("Die Schülerin muss mehr lernen.", "sie", "müssen", "mehr lernen", "Modalverb: muss → müsse"),
        _scenario("Das Kind will ein Eis.", "es", "wollen", "ein Eis", "Modalverb: will → wolle"),
        _scenario("Der Gast darf hier parken.", "er", "dürfen", "hier parken", "Modalverb: darf → dürfe"),
        _scenario("Die Firma soll bald schließen.", "sie", "sollen", "bald schließen", "Modalverb: soll → solle"),
        _scenario("Der Nachbar mag keine Katzen.", "er", "mögen", "keine Katzen", "Modalverb: mag → möge"),
    ),
    # Stem-changing verbs lose the change in Konjunktiv I
    4: (
        _scenario("Der Fahrer fährt zu schnell.", "er", "fahren", "zu schnell", "Kein Umlaut: fährt → fahre"),
        _scenario("Die Oma gibt uns Geld.", "sie", "geben", "uns Geld", "Kein Vokalwechsel: gibt → gebe"),
        _scenario("Der Arzt weiß die Antwort.", "er", "wissen", "die Antwort", "wissen: weiß → wisse"),
        _scenario("Das Mädchen sieht den Fehler.", "es", "sehen", "den Fehler", "Kein Vokalwechsel: sieht → sehe"),
        _scenario("Die Stadt wird größer.", "sie", "werden", "größer", "werden: wird → werde"),
    ),
    # Compound tenses: only the auxiliary moves into Konjunktiv I
    5: (
        _scenario("Der Minister ist gestern abgereist.", "er", "sein", "gestern abgereist", "Perfekt mit sein: ist → sei"),
        _scenario("Die Polizei hat den Dieb gefasst.", "sie", "haben", "den Dieb gefasst", "Perfekt mit haben: hat → habe"),
        _scenario("Das Team wird morgen gewinnen.", "es", "werden", "morgen gewinnen", "Futur: wird → werde"),
        _scenario("Der Zeuge hat nichts gesehen.", "er", "haben", "nichts gesehen", "Perfekt mit haben: hat → habe"),
        _scenario("Die Regierung ist zurückgetreten.", "sie", "sein", "zurückgetreten", "Perfekt mit sein: ist → sei"),
    ),
})

SPEAKERS: tuple[str, ...] = (
    "Der Polizist",
    "Die Frau",
    "Der Lehrer",
    "Die Ärztin",
    "Das Kind",
    "Der Nachbar",
    "Die Chefin",
    "Das Mädchen",
)

# Role words that select the reporting pronoun
FEMININE_ROLES = frozenset({"frau", "mutter", "oma", "tochter", "schwester", "dame"})
CHILD_ROLES = frozenset({"kind", "baby", "mädchen", "kätzchen"})
DIMINUTIVE_SUFFIXES = ("chen", "lein")

# Copula surface forms offered as extra distractors
COPULA_DISTRACTORS: Mapping[str, str] = MappingProxyType({"sein": "ist", "haben": "hat"})

MOOD_REFERENCE_TABLE: Mapping[str, object] = MappingProxyType({
    "title": "Konjunktiv I",
    "headers": ("Person", "Endung", "kommen", "sein"),
    "rows": (
        MappingProxyType({"person": "ich", "ending": "-e", "example": "komme", "sein": "sei"}),
        MappingProxyType({"person": "du", "ending": "-est", "example": "kommest", "sein": "sei(e)st"}),
        MappingProxyType({"person": "er/sie/es", "ending": "-e", "example": "komme", "sein": "sei"}),
        MappingProxyType({"person": "wir", "ending": "-en", "example": "kommen", "sein": "seien"}),
        MappingProxyType({"person": "ihr", "ending": "-et", "example": "kommet", "sein": "seiet"}),
        MappingProxyType({"person": "sie/Sie", "ending": "-en", "example": "kommen", "sein": "seien"}),
    ),
    "note": "Indirekte Rede nutzt vor allem die 3. Person Singular: er/sie/es + Stamm + -e (sein: sei).",
})


def mood_reference_table() -> dict:
    """Plain-data copy of the Konjunktiv I ending table."""
    return {
        "title": MOOD_REFERENCE_TABLE["title"],
        "headers": list(MOOD_REFERENCE_TABLE["headers"]),
        "rows": [dict(row) for row in MOOD_REFERENCE_TABLE["rows"]],
        "note": MOOD_REFERENCE_TABLE["note"],
    }
