"""User-facing notices raised by booking and onboarding flows.

A front end renders these as toasts. Validation and backend failures
end up here with the same level, there is no transient/permanent split.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    message: str
    description: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class NoticeBoard:
    """Ordered collection of notices emitted during one session."""

    def __init__(self) -> None:
        self._notices: list[Notice] = []

    def _push(self, level: NoticeLevel, message: str, description: Optional[str]) -> Notice:
        notice = Notice(level=level, message=message, description=description)
        self._notices.append(notice)
        log_level = logging.WARNING if level == NoticeLevel.ERROR else logging.INFO
        logger.log(log_level, "Notice [%s]: %s", level.value, message)
        return notice

    def success(self, message: str, description: Optional[str] = None) -> Notice:
        return self._push(NoticeLevel.SUCCESS, message, description)

    def info(self, message: str, description: Optional[str] = None) -> Notice:
        return self._push(NoticeLevel.INFO, message, description)

    def error(self, message: str, description: Optional[str] = None) -> Notice:
        return self._push(NoticeLevel.ERROR, message, description)

    @property
    def last(self) -> Optional[Notice]:
        return self._notices[-1] if self._notices else None

    def errors(self) -> list[Notice]:
        return [n for n in self._notices if n.level == NoticeLevel.ERROR]

    def all(self) -> list[Notice]:
        return list(self._notices)

    def clear(self) -> None:
        self._notices.clear()

    def __len__(self) -> int:
        return len(self._notices)
