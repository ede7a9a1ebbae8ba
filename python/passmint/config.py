"""
Settings persistence for Passmint.

Settings are saved as JSON in ~/.passmint/config.json unless the
PASSMINT_CONFIG environment variable points elsewhere. Missing keys fall
back to DEFAULTS.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from .charsets import BUILTIN_CLASSES
from .exceptions import ConfigError
from .models import ClassSettings, GenerationRequest

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "begin_with_letter": False,
    "classes": {
        name: {"include": True, "min": 1, "max": 16, "duplicates": True}
        for name, _ in BUILTIN_CLASSES
    },
    "other": {"include": "", "min": 0, "max": 0, "duplicates": True},
    "exclude": {"other": "", "similar": False, "ambiguous": False},
}


def config_path() -> str:
    override = os.getenv("PASSMINT_CONFIG")
    if override:
        return override
    return os.path.join(os.path.expanduser("~"), ".passmint", "config.json")


def _merge(base: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlay ``data`` onto a copy of ``base``."""
    out = copy.deepcopy(base)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _check_sections(settings: Dict[str, Any], path: str) -> None:
    """Raise ConfigError if a settings section is not a JSON object."""
    sections = [("classes", settings.get("classes"))]
    if isinstance(settings.get("classes"), dict):
        sections += [(f"classes.{name}", entry) for name, entry in settings["classes"].items()]
    sections += [("other", settings.get("other")), ("exclude", settings.get("exclude"))]

    for key, value in sections:
        if not isinstance(value, dict):
            raise ConfigError(f"Config file {path}: '{key}' must be a JSON object")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings merged over the defaults.

    Args:
        path: Config file path (defaults to config_path())

    Returns:
        Complete settings dictionary

    Raises:
        ConfigError: If the file is unreadable or a section is not a JSON object
    """
    p = path or config_path()
    if not os.path.exists(p):
        logger.debug(f"No config file at {p}, using defaults")
        return copy.deepcopy(DEFAULTS)

    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {p}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {p} must contain a JSON object")

    settings = _merge(DEFAULTS, data)
    _check_sections(settings, p)
    logger.debug(f"Loaded config from {p}")
    return settings


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    """Write settings as JSON and return the path written."""
    p = path or config_path()
    d = os.path.dirname(p)
    try:
        if d:
            os.makedirs(d, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise ConfigError(f"Could not write config file {p}: {e}") from e
    return p


def apply_overrides(settings: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of settings with dotted-key overrides applied.

    ``None`` values are skipped so unset command line options keep the
    configured value.

    Example:
        apply_overrides(cfg, {"classes.digits.min": 2, "length": None})
    """
    out = copy.deepcopy(settings)
    for dotted, value in overrides.items():
        if value is None:
            continue
        *parents, leaf = dotted.split(".")
        node = out
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
    return out


def request_from_settings(settings: Dict[str, Any]) -> GenerationRequest:
    """Build a GenerationRequest from a settings dictionary."""
    class_settings = settings.get("classes", {})
    classes = []
    for name, chars in BUILTIN_CLASSES:
        entry = class_settings.get(name, {})
        classes.append(ClassSettings(
            name=name,
            chars=chars,
            minimum=entry.get("min"),
            maximum=entry.get("max"),
            allow_duplicates=bool(entry.get("duplicates", True)),
            active=bool(entry.get("include", False)),
        ))

    other = settings.get("other", {})
    exclude = settings.get("exclude", {})
    groups = frozenset(g for g in ("similar", "ambiguous") if exclude.get(g))

    return GenerationRequest(
        target_length=settings.get("length"),
        classes=tuple(classes),
        begin_with_letter=bool(settings.get("begin_with_letter", False)),
        other_included=other.get("include") or "",
        other=ClassSettings(
            name="other",
            chars=other.get("include") or "",
            minimum=other.get("min"),
            maximum=other.get("max"),
            allow_duplicates=bool(other.get("duplicates", True)),
        ),
        other_excluded=exclude.get("other") or "",
        exclude_groups=groups,
    )
