#!/usr/bin/env python3
"""
Scrambling Engine
=================
Scrambles the interior letters of words while keeping the first and last
letters in place, so the text stays roughly readable.

Pipeline:
    text -> tokens -> probability gate -> segments -> scrambled core -> text

Whitespace runs are copied verbatim and every transformation is a
permutation of existing characters, so output length equals input length.
"""

import logging
import re
import unicodedata
from typing import List, NamedTuple, Optional, Sequence, TypeVar

from typogly.options import OptionsLike, coerce_options
from typogly.random_source import Draw, RandomSource, make_draw

logger = logging.getLogger(__name__)

T = TypeVar('T')

WHITESPACE_SPLIT_PATTERN = re.compile(r'(\s+)')
WHITESPACE_PATTERN = re.compile(r'\s+')


# =============================================================================
# Permutation
# =============================================================================

def shuffle(sequence: Sequence[T], draw: Draw) -> List[T]:
    """
    Fisher-Yates shuffle returning a new list.

    Args:
        sequence: Elements to permute (left untouched)
        draw: Source of floats in [0.0, 1.0)

    Returns:
        Permuted copy of ``sequence``
    """
    items = list(sequence)
    for i in range(len(items) - 1, 0, -1):
        j = int(draw() * (i + 1))
        items[i], items[j] = items[j], items[i]
    return items


# =============================================================================
# Segment Classification
# =============================================================================

class Segment(NamedTuple):
    """A token split around its letter-bounded core."""
    prefix: str
    core: str
    suffix: str


def is_letter(char: str) -> bool:
    """True for any code point in a Unicode letter category (L*)."""
    return unicodedata.category(char).startswith('L')


def extract_segment(token: str) -> Segment:
    """
    Split a token into leading non-letters, core, and trailing non-letters.

    A token without letters comes back entirely as prefix.
    """
    start = 0
    end = len(token)

    while start < end and not is_letter(token[start]):
        start += 1

    while end > start and not is_letter(token[end - 1]):
        end -= 1

    return Segment(token[:start], token[start:end], token[end:])


# =============================================================================
# Word Scrambling
# =============================================================================

def _recase(char: str, upper: bool) -> str:
    """Change case unless that would change the character count (e.g. 'ß')."""
    changed = char.upper() if upper else char.lower()
    return changed if len(changed) == len(char) else char


def scramble_word(word: str, draw: Draw, preserve_case: bool = True) -> str:
    """
    Shuffle the interior of a word, keeping the first and last characters.

    With ``preserve_case`` the interior is lower-cased before shuffling and
    the upper-case positions of the original interior are reapplied to the
    result. Case therefore stays with the position, not with the letter:
    "HeLLo" may come out as "HlLEo".
    """
    if len(word) <= 3:
        return word

    first, middle, last = word[0], word[1:-1], word[-1]

    if not preserve_case:
        return first + ''.join(shuffle(middle, draw)) + last

    scrambled = shuffle([_recase(c, upper=False) for c in middle], draw)
    restored = [
        _recase(char, upper=True) if original.isupper() else char
        for original, char in zip(middle, scrambled)
    ]
    return first + ''.join(restored) + last


# =============================================================================
# Tokenizing & Orchestration
# =============================================================================

def tokenize(text: str) -> List[str]:
    """
    Split text into alternating content and whitespace tokens.

    Joining the tokens gives back ``text``. Leading or trailing whitespace
    produces an empty content token at that end.
    """
    return WHITESPACE_SPLIT_PATTERN.split(text)


def is_whitespace(token: str) -> bool:
    return bool(WHITESPACE_PATTERN.fullmatch(token))


def scramble(text: str, options: OptionsLike = None, *,
             rng: Optional[RandomSource] = None, **overrides) -> str:
    """
    Scramble text using the typoglycemia effect.

    Args:
        text: Text to scramble
        options: ScrambleOptions or mapping (unknown keys are ignored)
        rng: Ambient source for unseeded calls (default: system CSPRNG)
        **overrides: Option fields given as keywords, e.g. ``seed=42``

    Returns:
        Scrambled text

    Example:
        scramble("Hello world", seed=42)        # same output every call
        scramble("Hello world", min_length=6)   # only 6+ letter words
    """
    opts = coerce_options(options, **overrides).resolved()
    draw = make_draw(opts.seed, rng)
    probability = opts.scramble_probability

    output = []
    scrambled_count = 0
    tokens = tokenize(text)

    for token in tokens:
        if is_whitespace(token):
            output.append(token)
            continue

        # The gate consumes one draw per content token, before the length check
        if probability < 1 and draw() > probability:
            output.append(token)
            continue

        prefix, core, suffix = extract_segment(token)
        if len(core) < opts.min_length:
            output.append(token)
            continue

        output.append(prefix + scramble_word(core, draw, opts.preserve_case) + suffix)
        scrambled_count += 1

    mode = 'ambient' if opts.seed is None else f'seed={opts.seed}'
    logger.debug(f"Scrambled {scrambled_count}/{len(tokens)} tokens ({mode})")
    return ''.join(output)
