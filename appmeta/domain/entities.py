from __future__ import annotations

import logging
from typing import List

from appmeta.domain.errors import ApplicationConflictError
from appmeta.domain.matching import filter_applications
from appmeta.domain.models import ApplicationMetadata

logger = logging.getLogger(__name__)


class ApplicationStore:
    """
    Insertion-ordered, in-memory collection of validated application records.

    The store does no locking of its own. Callers that share one instance
    across threads must serialize `insert` and `search`.
    """

    def __init__(self) -> None:
        self._applications: List[ApplicationMetadata] = []

    def __len__(self) -> int:
        return len(self._applications)

    def all(self) -> List[ApplicationMetadata]:
        return list(self._applications)

    def has_title(self, title: str) -> bool:
        return any(app.title == title for app in self._applications)

    def insert(self, app: ApplicationMetadata) -> None:
        """
        Append a validated record.

        Raises:
            ApplicationConflictError: If a record with the same title is stored.
        """
        if self.has_title(app.title):
            raise ApplicationConflictError(app.title)
        self._applications.append(app)
        logger.info(f"Application added: {app.title}")

    def search(self, query: ApplicationMetadata) -> List[ApplicationMetadata]:
        """
        Return stored records matching `query`, in insertion order.
        """
        return filter_applications(self._applications, query)

    def clear(self) -> None:
        self._applications.clear()
