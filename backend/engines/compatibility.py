"""Tag compatibility between nouns, adjectives and sentence contexts."""
from collections.abc import Collection, Sequence

from languages.german.declension import Case
from languages.german.lexicon import ADJECTIVES, CONTEXTS, Adjective, Context, Noun, Number


def compatible_adjectives(noun: Noun, adjectives: Sequence[Adjective] = ADJECTIVES) -> list[Adjective]:
    """Adjectives that may describe the noun. Never empty for the shipped lexicon.

    Universal adjectives always qualify; others need a shared tag. If nothing
    qualifies, the universal pool is returned.
    """
    matches = [a for a in adjectives if a.is_universal or a.tags & noun.tags]
    return matches or [a for a in adjectives if a.is_universal]


def context_accepts(context: Context, noun: Noun) -> bool:
    """Number and tag constraints of a context, ignoring its case."""
    if context.number is Number.SINGULAR and noun.is_plural:
        return False
    if context.number is Number.PLURAL and not noun.is_plural:
        return False
    if context.excluded_tags & noun.tags:
        return False
    if context.required_tags and not context.required_tags & noun.tags:
        return False
    return True


def compatible_contexts(
    noun: Noun,
    allowed_cases: Collection[Case],
    contexts: Sequence[Context] = CONTEXTS,
) -> list[Context]:
    """Contexts in an allowed case whose constraints the noun satisfies. May be empty."""
    return [c for c in contexts if c.case in allowed_cases and context_accepts(c, noun)]
