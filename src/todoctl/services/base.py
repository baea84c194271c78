"""BaseService — foundation for all todoctl services.

Every service receives a :class:`DataRoot` at construction time and
converts domain errors into failed :class:`ServiceResult` values at its
public boundary.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todoctl.domain.errors import TodoError
from todoctl.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from todoctl.infrastructure.data_root import DataRoot

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CreateService(BaseService):
            def create_record(self, ...) -> ServiceResult:
                return self._run("new_record", lambda: self._create(...))
    """

    def __init__(self, data_root: DataRoot) -> None:
        self._root = data_root

    def _run(self, op: str, action: Callable[[], ServiceResult]) -> ServiceResult:
        """Run *action*, turning any :class:`TodoError` into a failed result."""
        try:
            return action()
        except TodoError as exc:
            logger.debug("%s failed: %s", op, exc.message, exc_info=True)
            return ServiceResult.failure(op, exc)
