"""German language module: declension table, drill lexicon, Konjunktiv I pools."""
from .declension import ArticleClass, Case, DeclensionRule, Gender, lookup
from .module import GermanModule

__all__ = [
    "ArticleClass",
    "Case",
    "DeclensionRule",
    "Gender",
    "GermanModule",
    "lookup",
]
