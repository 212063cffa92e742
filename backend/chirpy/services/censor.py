"""
Chirpy Backend — Text Censor
=============================

What:  Replaces forbidden words in chirp text with a fixed mask.
How:   Positional split on the single space character, whole-token,
       case-insensitive comparison, rejoin with a single space.

Known limitation:
    Only exact tokens match. "kerfuffle!" or "fornax," keep their
    punctuation and are NOT censored. Runs of spaces produce empty tokens,
    which are preserved so the output keeps the original spacing.
"""

from typing import AbstractSet

CENSOR_MASK = "****"

FORBIDDEN_WORDS: frozenset = frozenset({"kerfuffle", "sharbert", "fornax"})


def censor(text: str, forbidden: AbstractSet[str] = FORBIDDEN_WORDS) -> str:
    """
    Return `text` with every forbidden token replaced by CENSOR_MASK.

    Examples:
        >>> censor("Kerfuffle happened")
        '**** happened'
        >>> censor("kerfuffle! now")
        'kerfuffle! now'
    """
    tokens = text.split(" ")
    return " ".join(
        CENSOR_MASK if token.lower() in forbidden else token
        for token in tokens
    )
