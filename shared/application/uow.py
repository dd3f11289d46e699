"""
Unit of Work Pattern

Manages database transactions so that a group of statements either
commits as a whole or leaves the store untouched.
"""

from abc import ABC, abstractmethod
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

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

    Wraps ``transaction.atomic`` for one database alias. Leaving the block
    normally commits; an exception rolls everything back and propagates
    unchanged. Calling ``rollback()`` inside the block discards the work
    without raising.

    Usage:
        with DjangoUnitOfWork() as uow:
            gateway.update("insert into BOOKINGS(FIRST_NAME) values (%s)", name)
            uow.track()
            # Transaction commits here
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self.statements = 0
        self.rolled_back = False
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self.statements = 0
        self.rolled_back = False
        self._transaction = transaction.atomic(using=self.using)
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is not None:
                self.rollback()
            elif not self.rolled_back:
                self.commit()
        finally:
            if self._transaction:
                transaction_scope, self._transaction = self._transaction, None
                transaction_scope.__exit__(exc_type, exc_val, exc_tb)

    def track(self, count: int = 1):
        """Record statements issued inside this unit of work"""
        self.statements += count

    def commit(self):
        """Let the atomic block commit on exit"""
        logger.debug(f"Committing transaction with {self.statements} statements")

    def rollback(self):
        """Mark the atomic block for rollback"""
        if self.rolled_back:
            return
        self.rolled_back = True
        logger.warning(f"Rolling back transaction, discarding {self.statements} statements")
        if self._transaction is not None:
            transaction.set_rollback(True, using=self.using)
