"""German drill lexicon: nouns, adjectives, sentence contexts and verbs.

Tags are semantic categories shared between nouns, adjectives and contexts.
Adjectives tagged ``all`` combine with any noun.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from core.errors import AppError, Result, collect_results, ensure, invariant_violated
from .declension import Case, Gender

UNIVERSAL_TAG = "all"

TAG_VOCABULARY = frozenset({
    "person", "animal", "object", "furniture", "food", "vehicle", "building", "plant",
})


class Number(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"
    ANY = "any"


@dataclass(frozen=True, slots=True)
class Noun:
    word: str
    gender: Gender
    meaning: str
    tags: frozenset[str] = frozenset()

    @property
    def is_plural(self) -> bool:
        return self.gender is Gender.PLURAL


@dataclass(frozen=True, slots=True)
class Adjective:
    word: str
    meaning: str
    tags: frozenset[str] = frozenset()

    @property
    def is_universal(self) -> bool:
        return UNIVERSAL_TAG in self.tags


@dataclass(frozen=True, slots=True)
class Context:
    """Sentence opener that governs the case of the following noun phrase."""
    text: str
    case: Case
    number: Number
    meaning_key: str
    required_tags: frozenset[str] = frozenset()
    excluded_tags: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class Verb:
    infinitive: str
    indicative: str   # first person singular present (ich ...)
    subjunctive: str  # Konjunktiv I, third person singular (er ...)


def _noun(word: str, gender: Gender, meaning: str, *tags: str) -> Noun:
    return Noun(word, gender, meaning, frozenset(tags))


def _adj(word: str, meaning: str, *tags: str) -> Adjective:
    return Adjective(word, meaning, frozenset(tags))


M, F, N, PL = Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER, Gender.PLURAL

NOUNS: tuple[Noun, ...] = (
    # People
    _noun("Mann", M, "man", "person"),
    _noun("Frau", F, "woman", "person"),
    _noun("Kind", N, "child", "person"),
    _noun("Kinder", PL, "children", "person"),
    _noun("Lehrer", M, "teacher", "person"),
    # Animals
    _noun("Hund", M, "dog", "animal"),
    _noun("Katze", F, "cat", "animal"),
    # Objects
    _noun("Tisch", M, "table", "object", "furniture"),
    _noun("Lampe", F, "lamp", "object", "furniture"),
    _noun("Buch", N, "book", "object"),
    _noun("Bücher", PL, "books", "object"),
    _noun("Stift", M, "pen", "object"),
    # Food
    _noun("Apfel", M, "apple", "food"),
    _noun("Brot", N, "bread", "food"),
    _noun("Suppe", F, "soup", "food"),
    # Vehicles / buildings
    _noun("Auto", N, "car", "vehicle"),
    _noun("Autos", PL, "cars", "vehicle"),
    _noun("Haus", N, "house", "building"),
    # Plants
    _noun("Blume", F, "flower", "plant"),
)

ADJECTIVES: tuple[Adjective, ...] = (
    _adj("gut", "good", UNIVERSAL_TAG),
    _adj("schlecht", "bad", UNIVERSAL_TAG),
    _adj("groß", "big/tall", UNIVERSAL_TAG),
    _adj("klein", "small", UNIVERSAL_TAG),
    _adj("schön", "beautiful", UNIVERSAL_TAG),
    _adj("alt", "old", UNIVERSAL_TAG),
    _adj("neu", "new", "object", "vehicle", "building", "furniture", "plant"),
    _adj("jung", "young", "person", "animal"),
    _adj("schnell", "fast", "person", "animal", "vehicle"),
    _adj("langsam", "slow", "person", "animal", "vehicle"),
    _adj("lecker", "tasty", "food"),
    _adj("frisch", "fresh", "food", "plant"),
    _adj("rot", "red", "object", "vehicle", "plant", "food", "furniture"),
    _adj("blau", "blue", "object", "vehicle", "plant", "furniture"),
    _adj("grün", "green", "object", "vehicle", "plant", "furniture"),
    _adj("teuer", "expensive", "object", "vehicle", "furniture", "food", "building"),
    _adj("nett", "nice", "person"),
    _adj("klug", "smart", "person", "animal"),
    _adj("heiß", "hot", "food"),
    _adj("kalt", "cold", "food"),
)


def _ctx(
    text: str,
    case: Case,
    number: Number,
    meaning_key: str,
    required: tuple[str, ...] = (),
    excluded: tuple[str, ...] = (),
) -> Context:
    return Context(text, case, number, meaning_key, frozenset(required), frozenset(excluded))


NOM, AKK, DAT, GEN = Case.NOMINATIVE, Case.ACCUSATIVE, Case.DATIVE, Case.GENITIVE

CONTEXTS: tuple[Context, ...] = (
    # Singular only
    _ctx("Das ist", NOM, Number.SINGULAR, "ctx_that_is"),
    _ctx("Hier steht", NOM, Number.SINGULAR, "ctx_here_stands", excluded=("vehicle",)),
    # Plural only
    _ctx("Das sind", NOM, Number.PLURAL, "ctx_these_are"),
    _ctx("Hier stehen", NOM, Number.PLURAL, "ctx_here_stand", excluded=("vehicle",)),
    # Either number
    _ctx("Ich sehe", AKK, Number.ANY, "ctx_i_see"),
    _ctx("Er kauft", AKK, Number.ANY, "ctx_he_buys", excluded=("person",)),
    _ctx("Wir haben", AKK, Number.ANY, "ctx_we_have", excluded=("person",)),
    _ctx("Ich spiele mit", DAT, Number.ANY, "ctx_i_play", required=("person", "animal")),
    _ctx("Das Geschenk ist von", DAT, Number.ANY, "ctx_gift_from", required=("person",)),
    _ctx("Wegen", GEN, Number.ANY, "ctx_because_of"),
    _ctx("Trotz", GEN, Number.ANY, "ctx_despite"),
    _ctx("Er sucht", AKK, Number.ANY, "ctx_he_searches", excluded=("person",)),
    _ctx("Sie braucht", AKK, Number.ANY, "ctx_she_needs"),
    _ctx("Wir danken", DAT, Number.ANY, "ctx_we_thank", required=("person",)),
    _ctx("Er wohnt bei", DAT, Number.ANY, "ctx_he_lives_with", required=("person",)),
    _ctx("Innerhalb", GEN, Number.SINGULAR, "ctx_inside", required=("building", "vehicle")),
)

VERBS: Mapping[str, Verb] = MappingProxyType({
    v.infinitive: v
    for v in (
        Verb("sein", "bin", "sei"),
        Verb("haben", "habe", "habe"),
        Verb("kommen", "komme", "komme"),
        Verb("wohnen", "wohne", "wohne"),
        Verb("arbeiten", "arbeite", "arbeite"),
        Verb("spielen", "spiele", "spiele"),
        Verb("lernen", "lerne", "lerne"),
        Verb("fahren", "fahre", "fahre"),
        Verb("geben", "gebe", "gebe"),
        Verb("sehen", "sehe", "sehe"),
        Verb("werden", "werde", "werde"),
        Verb("können", "kann", "könne"),
        Verb("müssen", "muss", "müsse"),
        Verb("wollen", "will", "wolle"),
        Verb("dürfen", "darf", "dürfe"),
        Verb("sollen", "soll", "solle"),
        Verb("mögen", "mag", "möge"),
        Verb("wissen", "weiß", "wisse"),
    )
})

# Fallback round used when sampling cannot satisfy the active filters
FALLBACK_NOUN = NOUNS[0]
FALLBACK_ADJECTIVE = ADJECTIVES[0]
FALLBACK_CONTEXT = CONTEXTS[0]


def validate_lexicon(
    nouns: tuple[Noun, ...] = NOUNS,
    adjectives: tuple[Adjective, ...] = ADJECTIVES,
    contexts: tuple[Context, ...] = CONTEXTS,
) -> Result[list[None], list[AppError]]:
    """Check the static lexicon's invariants, collecting every violation."""
    origin = "german.lexicon"
    checks = [
        ensure(
            any(a.is_universal for a in adjectives),
            invariant_violated("universal_adjective_pool", "no adjective tagged 'all'", origin=origin),
        ),
        ensure(bool(nouns), invariant_violated("non_empty_nouns", origin=origin)),
    ]
    for noun in nouns:
        unknown = noun.tags - TAG_VOCABULARY
        checks.append(ensure(
            not unknown,
            invariant_violated("known_tags", f"noun {noun.word}: {sorted(unknown)}", origin=origin),
        ))
    for adj in adjectives:
        unknown = adj.tags - TAG_VOCABULARY - {UNIVERSAL_TAG}
        checks.append(ensure(
            not unknown,
            invariant_violated("known_tags", f"adjective {adj.word}: {sorted(unknown)}", origin=origin),
        ))
    for ctx in contexts:
        unknown = (ctx.required_tags | ctx.excluded_tags) - TAG_VOCABULARY
        checks.append(ensure(
            not unknown,
            invariant_violated("known_tags", f"context {ctx.meaning_key}: {sorted(unknown)}", origin=origin),
        ))
    return collect_results(checks)
