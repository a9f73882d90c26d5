from __future__ import annotations

from dataclasses import dataclass

from .component_schema import Direction
from .config import DEFAULT_CONFIG

_RTL_LANGUAGES = frozenset(
    {"ar", "arc", "ckb", "dv", "fa", "ha", "he", "iw", "khw", "ks", "ku", "ps", "sd", "ur", "yi"}
)


def language_of(locale: str) -> str:
    return locale.replace("_", "-").split("-", 1)[0].strip().lower()


def direction_for_locale(locale: str) -> Direction:
    return "rtl" if language_of(locale) in _RTL_LANGUAGES else "ltr"


@dataclass(frozen=True)
class LocaleContext:
    """Ambient locale handed to widgets; supplies the default text direction."""

    locale: str = DEFAULT_CONFIG.default_locale

    def __post_init__(self) -> None:
        if not self.locale.strip():
            raise ValueError("locale must be non-empty")

    @property
    def direction(self) -> Direction:
        return direction_for_locale(self.locale)
