"""German grammar configuration for callers."""
from languages.base import ArticleClassConfig, CaseConfig, GenderConfig, GrammarConfig
from .declension import DECLENSION_PATTERNS, ArticleClass

# Case configurations with question-word hints
CASE_CONFIGS = (
    CaseConfig(id="nominative", label="Nominativ", hint="wer? was?"),
    CaseConfig(id="accusative", label="Akkusativ", hint="wen? was?"),
    CaseConfig(id="dative", label="Dativ", hint="wem?"),
    CaseConfig(id="genitive", label="Genitiv", hint="wessen?"),
)

GENDER_CONFIGS = (
    GenderConfig(id="masculine", label="Maskulin", short="m"),
    GenderConfig(id="feminine", label="Feminin", short="f"),
    GenderConfig(id="neuter", label="Neutrum", short="n"),
    GenderConfig(id="plural", label="Plural", short="pl"),
)

ARTICLE_CLASS_CONFIGS = (
    ArticleClassConfig(id="definite", label="der/die/das", pattern=DECLENSION_PATTERNS[ArticleClass.DEFINITE]),
    ArticleClassConfig(id="indefinite", label="ein/eine/kein", pattern=DECLENSION_PATTERNS[ArticleClass.INDEFINITE]),
    ArticleClassConfig(id="zero", label="ohne Artikel", pattern=DECLENSION_PATTERNS[ArticleClass.ZERO]),
)

GERMAN_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    genders=GENDER_CONFIGS,
    article_classes=ARTICLE_CLASS_CONFIGS,
    has_declension=True,
    has_subjunctive=True,
)
