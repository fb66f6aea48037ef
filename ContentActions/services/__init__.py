"""
Content action services.
"""

from .action_service import (
    RevisionResult,
    approve_action,
    approve_generated_content,
    request_new_generation,
)
from .temporary_content_service import TemporaryContentService
from .transaction_service import lifecycle_transaction

__all__ = [
    'RevisionResult',
    'TemporaryContentService',
    'approve_action',
    'approve_generated_content',
    'lifecycle_transaction',
    'request_new_generation',
]
