import logging
from typing import Callable, TypeVar

from core.errors import VoyagoError
from core.state.notices import Notice, NoticeLevel, NoticeLog, NoticeSink

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Provider:
    """Shared loading/error bookkeeping for the client-side caches.

    Reads record a failure in ``error`` and keep the previous collection.
    Writes publish a notice and abort on failure. Neither retries.
    """

    def __init__(self, notices: NoticeSink | None = None) -> None:
        self.notices: NoticeSink = notices if notices is not None else NoticeLog()
        self.is_loading = False
        self.error: str | None = None

    def notify(self, level: NoticeLevel, message: str) -> None:
        self.notices(Notice(level=level, message=message))

    def _read(self, load: Callable[[], T]) -> T | None:
        self.is_loading = True
        self.error = None
        try:
            return load()
        except VoyagoError as e:
            logger.exception("%s read failed", type(self).__name__)
            self.error = e.user_message
            return None
        finally:
            self.is_loading = False

    def _write(self, action: Callable[[], T], success_message: str | None = None) -> T | None:
        try:
            result = action()
        except VoyagoError as e:
            logger.exception("%s write failed", type(self).__name__)
            self.notify(NoticeLevel.ERROR, e.user_message)
            return None
        if success_message:
            self.notify(NoticeLevel.SUCCESS, success_message)
        return result
