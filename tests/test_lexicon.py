"""Tests for languages/german/lexicon.py and the language registry."""
from dataclasses import FrozenInstanceError

import pytest

from core.errors import ErrorCode
from engines.progression import PASS_THRESHOLDS
from languages import get_module, list_languages
from languages.german.declension import Case
from languages.german.lexicon import (
    ADJECTIVES,
    CONTEXTS,
    NOUNS,
    VERBS,
    Adjective,
    validate_lexicon,
)
from languages.german.mood import MOOD_POOLS, MOOD_REFERENCE_TABLE


def test_shipped_lexicon_is_valid():
    assert validate_lexicon().is_ok()


def test_missing_universal_pool_is_reported():
    """Without an 'all' adjective the compatibility fallback would be empty."""
    specific = tuple(a for a in ADJECTIVES if not a.is_universal)
    result = validate_lexicon(adjectives=specific)
    assert result.is_err()
    errors = result.unwrap_err()
    assert any(e.metadata.get("invariant") == "universal_adjective_pool" for e in errors)
    assert all(e.code is ErrorCode.E5004_INVARIANT_VIOLATED for e in errors)


def test_unknown_tags_are_collected():
    bad = ADJECTIVES + (Adjective("laut", "loud", frozenset({"noise"})),)
    result = validate_lexicon(adjectives=bad)
    assert result.is_err()
    assert "laut" in result.unwrap_err()[0].message


def test_plural_nouns_present():
    assert any(n.is_plural for n in NOUNS)
    assert any(not n.is_plural for n in NOUNS)


def test_every_case_has_contexts():
    assert {c.case for c in CONTEXTS} == set(Case)


def test_modal_verbs_differ_from_indicative():
    assert VERBS["können"].indicative == "kann"
    assert VERBS["können"].subjunctive == "könne"


def test_german_module_registered():
    module = get_module("de")
    assert module.native_name == "Deutsch"
    assert {"code": "de", "name": "German", "nativeName": "Deutsch"} in list_languages()


def test_unknown_language_raises():
    with pytest.raises(ValueError, match="not registered"):
        get_module("xx")


def test_grammar_config_dict():
    config = get_module("de").get_grammar_config().to_dict()
    assert [c["id"] for c in config["cases"]] == ["nominative", "accusative", "dative", "genitive"]
    assert config["hasDeclension"] is True
    assert {a["pattern"] for a in config["articleClasses"]} == {"weak", "mixed", "strong"}


def test_reference_tables():
    module = get_module("de")
    tables = module.get_declension_tables()
    assert set(tables) == {"weak", "mixed", "strong"}
    assert tables["mixed"]["accusative"]["masculine"]["article"] == "einen"
    mood = module.get_mood_reference_table()
    assert mood["rows"][2]["sein"] == "sei"


def test_mood_reference_table_is_copied_per_call():
    module = get_module("de")
    module.get_mood_reference_table()["rows"].clear()
    assert len(module.get_mood_reference_table()["rows"]) == 6
    assert len(MOOD_REFERENCE_TABLE["rows"]) == 6


def test_static_tables_are_read_only():
    with pytest.raises(TypeError):
        VERBS["gehen"] = VERBS["kommen"]
    with pytest.raises(TypeError):
        MOOD_POOLS[6] = ()
    with pytest.raises(TypeError):
        PASS_THRESHOLDS[1] = 0.0
    with pytest.raises(TypeError):
        MOOD_REFERENCE_TABLE["rows"][0]["sein"] = "ist"


def test_grammar_config_is_frozen():
    config = get_module("de").get_grammar_config()
    with pytest.raises(FrozenInstanceError):
        config.has_declension = False
    assert isinstance(config.cases, tuple)
