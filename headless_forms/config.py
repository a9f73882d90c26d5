from __future__ import annotations

from dataclasses import asdict, dataclass
import math
import os
import re
from typing import Any, Mapping

LOCALE_ENV_VAR = "HEADLESS_FORMS_LOCALE"

_LOCALE_TAG = re.compile(r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})*$")


@dataclass(frozen=True)
class FormsConfig:
    """Library-wide defaults used when a widget leaves a prop unset."""

    default_locale: str = "en-US"
    slider_min: float = 0.0
    slider_max: float = 100.0
    slider_step: float = 1.0


DEFAULT_CONFIG = FormsConfig()


def validate_forms_config(overrides: Mapping[str, Any] | None = None) -> FormsConfig:
    """Validate and merge overrides against the library defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown forms config key: {key}")
            raw[key] = value

    locale = raw["default_locale"]
    if not isinstance(locale, str) or not _LOCALE_TAG.match(locale.strip()):
        raise ValueError("Config `default_locale` must be a BCP 47 style tag such as `en-US`")

    for key in ("slider_min", "slider_max", "slider_step"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ValueError(f"Config `{key}` must be a finite number")

    if float(raw["slider_step"]) <= 0:
        raise ValueError("Config `slider_step` must be a positive number")
    if float(raw["slider_min"]) > float(raw["slider_max"]):
        raise ValueError("Config `slider_min` must be <= `slider_max`")

    return FormsConfig(
        default_locale=locale.strip(),
        slider_min=float(raw["slider_min"]),
        slider_max=float(raw["slider_max"]),
        slider_step=float(raw["slider_step"]),
    )


def load_forms_config(environ: Mapping[str, str] | None = None) -> FormsConfig:
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    locale = env.get(LOCALE_ENV_VAR, "").strip()
    if locale:
        overrides["default_locale"] = locale
    return validate_forms_config(overrides)
