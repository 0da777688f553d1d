#!/usr/bin/env python3
"""
Typogly - Readable Text Scrambling
==================================

Scrambles the interior letters of words while keeping the first and last
letters fixed (the "typoglycemia" effect), optionally reproducible from a
seed.

Quick Start
-----------
    from typogly import scramble, create_scrambler

    scramble("According to research at Cambridge University")
    scramble("Hello world", seed=42)          # reproducible
    scramble("Hello world", {"minLength": 6}) # camelCase keys work too

    light = create_scrambler("light")         # preset from app.yaml
    light("Hello wonderful world", seed=7)

Modules
-------
    typogly.engine        - Tokenizer, segment classifier, word scrambler
    typogly.random_source - Park-Miller generator and ambient source
    typogly.options       - ScrambleOptions record, merging and defaults
    typogly.config        - Named presets
    typogly.settings      - YAML settings loader

CLI Usage
---------
    python -m typogly scramble "Hello wonderful world" --seed 42
    echo "Hello world" | python -m typogly scramble --preset half
    python -m typogly presets
"""

__version__ = "1.0.0"
__author__ = "Typogly"

from typing import Callable, Optional, Union

# =============================================================================
# Submodule Imports
# =============================================================================

from . import engine
from . import random_source
from . import options
from . import config
from . import settings

from .engine import (
    scramble,
    scramble_word,
    extract_segment,
    shuffle,
    tokenize,
    is_letter,
    Segment,
)
from .random_source import (
    SeededRandom,
    AmbientRandom,
    RandomSource,
    get_rng,
    make_draw,
)
from .options import (
    ScrambleOptions,
    coerce_options,
)
from .config import (
    get_preset,
    list_presets,
    resolve_options,
)


# =============================================================================
# Convenience Functions
# =============================================================================

Scrambler = Callable[..., str]


def create_scrambler(default_options: Union[str, options.OptionsLike] = None,
                     rng: Optional[RandomSource] = None) -> Scrambler:
    """
    Create a scrambler with preset options.

    The returned function merges its per-call options over the defaults
    (per-call values win field by field) and hands off to ``scramble``. No
    generator outlives a call, so a seeded scrambler gives the same output
    for the same text every time.

    Args:
        default_options: Preset name, ScrambleOptions, mapping, or None
        rng: Ambient source for unseeded calls

    Example:
        scrambler = create_scrambler({"seed": 42, "min_length": 5})
        scrambler("Hello world")                    # uses defaults
        scrambler("Hello world", {"min_length": 3}) # overrides min_length
        scrambler("Hello world", seed=99)           # keyword overrides too
    """
    defaults = resolve_options(default_options)

    def scrambler(text: str, override_options: options.OptionsLike = None, **overrides) -> str:
        merged = defaults.merged(coerce_options(override_options, **overrides))
        return scramble(text, merged, rng=rng)

    return scrambler


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Version
    '__version__',

    # Scrambling
    'scramble',
    'create_scrambler',
    'scramble_word',
    'extract_segment',
    'shuffle',
    'tokenize',
    'is_letter',
    'Segment',

    # Random sources
    'SeededRandom',
    'AmbientRandom',
    'RandomSource',
    'get_rng',
    'make_draw',

    # Options & presets
    'ScrambleOptions',
    'coerce_options',
    'get_preset',
    'list_presets',
    'resolve_options',

    # Submodules
    'engine',
    'random_source',
    'options',
    'config',
    'settings',
]
