"""
Unit of Work Pattern

Manages database transactions so that a read-check-write sequence
(e.g. availability check followed by a booking insert) runs as one unit.
"""

from abc import ABC, abstractmethod
import logging

from django.db import transaction

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Wraps ``transaction.atomic()``. Row locks taken with
    ``select_for_update()`` inside the block are held until it exits,
    and any exception raised inside rolls back every write.

    Usage:
        with DjangoUnitOfWork(scope=f"room {room_id}"):
            room = Room.objects.select_for_update().get(pk=room_id)
            # check bookings, insert the new one
            # Transaction commits here
    """

    def __init__(self, scope: str = '', using: str | None = None):
        self.scope = scope
        self._using = using
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self._using)
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """The atomic block commits on exit; nothing else to flush."""
        logger.debug(f"Committing transaction ({self.scope or 'unscoped'})")

    def rollback(self):
        """The atomic block rolls back on exit."""
        logger.warning(f"Rolling back transaction ({self.scope or 'unscoped'})")
