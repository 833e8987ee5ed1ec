"""Transient user-facing messages raised by provider actions."""

from collections import deque
from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notice(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: NoticeLevel
    message: str


NoticeSink = Callable[[Notice], None]

MAX_NOTICES = 50


class NoticeLog:
    """In-memory sink keeping the most recent notices in arrival order."""

    def __init__(self, maxlen: int = MAX_NOTICES) -> None:
        self.notices: deque[Notice] = deque(maxlen=maxlen)

    def __call__(self, notice: Notice) -> None:
        self.notices.append(notice)

    @property
    def last(self) -> Notice | None:
        return self.notices[-1] if self.notices else None

    def messages(self, level: NoticeLevel | None = None) -> list[str]:
        return [n.message for n in self.notices if level is None or n.level is level]
