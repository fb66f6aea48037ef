"""
Transaction boundary for the content action lifecycle.

Lifecycle operations never open their own transaction: the route opens one
with lifecycle_transaction() and hands the database alias down. Wait and
execution timeouts are a backstop against pool exhaustion; nothing here
retries.
"""

import logging
from contextlib import contextmanager

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, connections, transaction
from django.db.transaction import TransactionManagementError

logger = logging.getLogger(__name__)


def _configured_timeouts():
    config = getattr(settings, 'CONTENT_ACTION_TRANSACTION', {})
    return config.get('MAX_WAIT_MS', 15000), config.get('TIMEOUT_MS', 15000)


@contextmanager
def lifecycle_transaction(using=DEFAULT_DB_ALIAS, max_wait_ms=None, timeout_ms=None):
    """
    Open one atomic block for a lifecycle request.

    On PostgreSQL the limits are applied with SET LOCAL so they end with the
    transaction: max_wait_ms bounds lock acquisition, timeout_ms bounds each
    statement. Other backends only get the atomic block.
    """
    default_wait, default_timeout = _configured_timeouts()
    max_wait_ms = default_wait if max_wait_ms is None else max_wait_ms
    timeout_ms = default_timeout if timeout_ms is None else timeout_ms

    with transaction.atomic(using=using):
        connection = connections[using]
        if connection.vendor == 'postgresql':
            with connection.cursor() as cursor:
                cursor.execute(f"SET LOCAL lock_timeout = {int(max_wait_ms)}")
                cursor.execute(f"SET LOCAL statement_timeout = {int(timeout_ms)}")
        yield using


def ensure_in_transaction(using=DEFAULT_DB_ALIAS):
    """Fail fast when a lifecycle operation is called without a transaction."""
    if not connections[using].in_atomic_block:
        raise TransactionManagementError(
            "Operações do ciclo de vida devem ser executadas dentro de lifecycle_transaction()"
        )
