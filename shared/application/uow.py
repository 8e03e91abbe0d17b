"""
Persistence Boundary

Wraps a single repository operation in a database transaction and
converts storage failures into a generic ``InternalError``. The detail
of the failure is logged and never exposed to the client.
"""

import logging

from django.db import DatabaseError, transaction

from shared.domain.errors import InternalError

logger = logging.getLogger(__name__)


class PersistenceBoundary:
    """
    Transaction scope for one operation

    Usage:
        with PersistenceBoundary("create_failed", "Failed to create place"):
            place = Place.objects.create(**fields)

    Domain errors raised inside the block propagate untouched; any
    ``DatabaseError`` rolls the transaction back and is re-raised as
    ``InternalError(code, message)``.
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        self._transaction = None

    def __enter__(self):
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            self._transaction.__exit__(exc_type, exc_val, exc_tb)
        except DatabaseError as exc:
            # Commit itself failed
            logger.error("Commit failed for %s: %s", self.code, exc, exc_info=True)
            raise InternalError(self.code, self.message) from exc

        if exc_type is not None and issubclass(exc_type, DatabaseError):
            logger.error("Persistence failure for %s: %s", self.code, exc_val, exc_info=(exc_type, exc_val, exc_tb))
            raise InternalError(self.code, self.message) from exc_val
        return False
