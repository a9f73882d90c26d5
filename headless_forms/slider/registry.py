from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Iterator

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThumbRegistration:
    """What a thumb hands the slider: an identity it picked and a way to focus it."""

    id: str
    focus: Callable[[], None] = field(default=lambda: None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.id.strip():
            raise ValueError("thumb id must be non-empty")


class ThumbRegistry:
    """Ordered collection of mounted thumbs.

    Order is registration order. Indices are always derived by scanning the
    live list, so removing an earlier thumb shifts later indices instead of
    leaving stale ones behind.
    """

    def __init__(self) -> None:
        self._thumbs: list[ThumbRegistration] = []

    def register(self, thumb: ThumbRegistration) -> ThumbRegistration:
        self._thumbs.append(thumb)
        return thumb

    def deregister(self, identity: str) -> bool:
        for idx, thumb in enumerate(self._thumbs):
            if thumb.id == identity:
                del self._thumbs[idx]
                return True
        LOGGER.debug("deregister ignored for unknown thumb `%s`", identity)
        return False

    def index_of(self, identity: str) -> int:
        for idx, thumb in enumerate(self._thumbs):
            if thumb.id == identity:
                return idx
        return -1

    def snapshot(self) -> tuple[ThumbRegistration, ...]:
        return tuple(self._thumbs)

    def first(self) -> ThumbRegistration | None:
        return self._thumbs[0] if self._thumbs else None

    def __len__(self) -> int:
        return len(self._thumbs)

    def __iter__(self) -> Iterator[ThumbRegistration]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> ThumbRegistration:
        return self._thumbs[index]
