"""
Config module for Wordle Solver.

Solver settings with built-in defaults, optionally overridden from a JSON
file (see config/settings.json).
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from dictionary import DEFAULT_EXTRA_PATH, DEFAULT_GOALS_PATH

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "settings.json"


@dataclass
class SolverConfig:
    """
    Attributes:
        goals_path: Goal word list
        extra_path: Extra accepted guesses
        list_threshold: Print the goal words when at most this many remain
        search_threshold: Only search for a guess below this many goals
        seed: Shuffle seed; None for random
        workers: Processes used by the guess search
        show_progress: Progress bar while searching
        max_rounds: Stop after this many guesses; 0 = no limit
    """
    goals_path: str = str(DEFAULT_GOALS_PATH)
    extra_path: str = str(DEFAULT_EXTRA_PATH)
    list_threshold: int = 20
    search_threshold: int = 1000
    seed: Optional[int] = None
    workers: int = 1
    show_progress: bool = True
    max_rounds: int = 0


# Accepted JSON types per setting
_FIELD_TYPES = {
    "goals_path": (str,),
    "extra_path": (str,),
    "list_threshold": (int,),
    "search_threshold": (int,),
    "seed": (int, type(None)),
    "workers": (int,),
    "show_progress": (bool,),
    "max_rounds": (int,),
}


def load_config(config_file: Optional[str | Path] = None) -> SolverConfig:
    """
    Load settings from JSON or use defaults.

    Unknown keys and wrongly typed values are skipped with a warning; a
    missing or unreadable file falls back to defaults entirely.

    Args:
        config_file: Path to settings JSON (default: config/settings.json)

    Returns:
        SolverConfig
    """
    config = SolverConfig()
    config_path = Path(config_file) if config_file else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if config_file is not None:
            log.warning(f"Config file not found: {config_path}; using defaults")
        return config

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.warning(f"Failed to load config from {config_path}: {e}; using defaults")
        return config

    if not isinstance(loaded, dict):
        log.warning(f"Config in {config_path} must be a JSON object; using defaults")
        return config

    known = {f.name for f in fields(SolverConfig)}
    for key, value in loaded.items():
        if key.startswith("_"):
            # Comment / meta keys
            continue
        if key not in known:
            log.warning(f"Unknown config key '{key}' in {config_path}; ignored")
            continue
        expected = _FIELD_TYPES[key]
        # bool is an int subclass; don't let true/false pass as a number
        if not isinstance(value, expected) or (
            isinstance(value, bool) and bool not in expected
        ):
            log.warning(
                f"Invalid type for config '{key}': {type(value).__name__}. Using default."
            )
            continue
        setattr(config, key, value)

    log.debug(f"Loaded config from {config_path}: {config}")
    return config
