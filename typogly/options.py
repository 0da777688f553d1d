#!/usr/bin/env python3
"""
Scramble Options
================
The options record shared by the engine, the preset layer and the CLI.

Fields left as ``None`` are unset: they lose to any explicit value when
options are merged, and take their defaults from ``app.yaml`` when resolved.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

from typogly.settings import get_setting


# Fallbacks used when app.yaml has no scramble.defaults entry
DEFAULT_MIN_LENGTH = 4
DEFAULT_PRESERVE_CASE = True
DEFAULT_SCRAMBLE_PROBABILITY = 1.0

# camelCase names accepted in mappings
ALIASES = {
    'minLength': 'min_length',
    'preserveCase': 'preserve_case',
    'scrambleProbability': 'scramble_probability',
}


@dataclass(frozen=True)
class ScrambleOptions:
    """Scrambling configuration."""
    min_length: Optional[int] = None              # Minimum core length to scramble
    seed: Optional[int] = None                    # Deterministic mode when set
    preserve_case: Optional[bool] = None          # Positional case reattachment
    scramble_probability: Optional[float] = None  # Per-word chance of scrambling

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ScrambleOptions':
        """Build options from a mapping, ignoring unrecognized keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            key = ALIASES.get(key, key)
            if key in known:
                values[key] = value
        return cls(**values)

    def explicit(self) -> dict:
        """Fields that have been set, as a dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}

    def merged(self, override: Optional['ScrambleOptions']) -> 'ScrambleOptions':
        """Shallow merge: every field set on ``override`` wins."""
        if override is None:
            return self
        return replace(self, **override.explicit())

    def resolved(self) -> 'ScrambleOptions':
        """Copy with every unset field (except ``seed``) filled from defaults."""
        cfg = get_setting("scramble.defaults", {}) or {}
        return ScrambleOptions(
            min_length=_first(self.min_length, cfg.get("min_length"), DEFAULT_MIN_LENGTH),
            seed=self.seed,
            preserve_case=_first(self.preserve_case, cfg.get("preserve_case"), DEFAULT_PRESERVE_CASE),
            scramble_probability=_first(
                self.scramble_probability,
                cfg.get("scramble_probability"),
                DEFAULT_SCRAMBLE_PROBABILITY,
            ),
        )


OptionsLike = Union[ScrambleOptions, Mapping[str, Any], None]


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


def coerce_options(options: OptionsLike = None, **overrides) -> ScrambleOptions:
    """
    Normalize any accepted options form into ScrambleOptions.

    Args:
        options: ScrambleOptions, a mapping, or None
        **overrides: Keyword fields merged over ``options``

    Raises:
        TypeError: If ``options`` is neither a mapping nor ScrambleOptions
    """
    if options is None:
        result = ScrambleOptions()
    elif isinstance(options, ScrambleOptions):
        result = options
    elif isinstance(options, Mapping):
        result = ScrambleOptions.from_mapping(options)
    else:
        raise TypeError(f"Invalid options: {options!r}")

    if overrides:
        result = result.merged(ScrambleOptions.from_mapping(overrides))
    return result
