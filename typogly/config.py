#!/usr/bin/env python3
"""
Preset Management
=================
Named option sets loaded from the ``presets`` section of app.yaml.

Usage:
    from typogly.config import get_preset, list_presets

    options = get_preset("light")
    list_presets()  # {"light": {"description": ..., "options": {...}}, ...}
"""

from typing import Dict, Union

from typogly.options import OptionsLike, ScrambleOptions, coerce_options
from typogly.settings import get_setting


def load_presets() -> Dict[str, dict]:
    """Raw preset table from settings (empty when none are configured)."""
    presets = get_setting("presets", {}) or {}
    return {str(name): preset or {} for name, preset in presets.items()}


def get_preset(name: str) -> ScrambleOptions:
    """
    Resolve a preset name to scramble options.

    Args:
        name: Preset name (e.g., "light")

    Returns:
        ScrambleOptions holding only the fields the preset sets

    Raises:
        ValueError: If the preset name is not found
    """
    presets = load_presets()
    preset = presets.get(name)
    if preset is None:
        available = ', '.join(sorted(presets)) or 'none'
        raise ValueError(
            f"Unknown preset '{name}'. "
            f"Available presets: {available}"
        )
    return ScrambleOptions.from_mapping(preset.get("options") or {})


def list_presets() -> dict:
    """List all available presets with descriptions."""
    return {
        name: {
            "description": p.get("description", ""),
            "options": ScrambleOptions.from_mapping(p.get("options") or {}).explicit(),
        }
        for name, p in load_presets().items()
    }


def resolve_options(preset_or_options: Union[str, OptionsLike]) -> ScrambleOptions:
    """
    Accept either a preset name or any options form.

    Args:
        preset_or_options: Either:
            - str: Preset name (e.g., "half")
            - ScrambleOptions or mapping: used as-is
            - None: empty options
    """
    if isinstance(preset_or_options, str):
        return get_preset(preset_or_options)
    return coerce_options(preset_or_options)
