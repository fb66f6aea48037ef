"""
Content action lifecycle: approval and revision requests.

Every function here expects to run inside lifecycle_transaction() on the
given database alias; loading the Action, validating it and writing the new
state all share that one transaction.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import F
from django.utils import timezone

from Teams.services.team_membership_service import TeamMembershipService

from ..exceptions import (
    ActionNotFound,
    ActionPermissionDenied,
    TemporaryContentMismatch,
    TemporaryContentNotFound,
)
from ..models import Action, ActionStatus, TemporaryContent
from ..payloads import CreateContentResult
from ..signals import content_approved
from .transaction_service import ensure_in_transaction

logger = logging.getLogger(__name__)


@dataclass
class RevisionResult:
    """Outcome of a revision request: the Action and its new candidate."""
    action: Action
    temporary_content: TemporaryContent


def _get_or_none(model, pk, using):
    try:
        return model.objects.using(using).filter(pk=pk).first()
    except (DjangoValidationError, ValueError):
        # Malformed identifiers cannot match any row
        return None


def _load_action(action_id, using) -> Action:
    action = _get_or_none(Action, action_id, using)
    if action is None:
        raise ActionNotFound()
    return action


def _check_requester(action: Action, requester_user_id, message: str, using):
    if not TeamMembershipService.can_act_on(
        owner_user_id=action.user_id,
        team_id=action.team_id,
        requester_user_id=requester_user_id,
        using=using,
    ):
        raise ActionPermissionDenied(message)


def _publish_approval(action: Action):
    responses = content_approved.send_robust(
        sender=Action,
        action_id=action.pk,
        team_id=action.team_id,
        user_id=action.user_id,
    )
    for receiver, response in responses:
        if isinstance(response, Exception):
            logger.error(
                f"Falha ao processar aprovação da ação {action.pk} em {receiver}: {response}")


def _commit_approval(action: Action, using, result=None) -> bool:
    """
    Flip approved false -> true with a conditional UPDATE.

    Returns False when another transaction approved the Action first; the
    caller then treats the call as an idempotent no-op.
    """
    changes = {
        'approved': True,
        'status': ActionStatus.APPROVED,
        'updated_at': timezone.now(),
    }
    if result is not None:
        changes['result'] = result

    updated = Action.objects.using(using).filter(
        pk=action.pk, approved=False
    ).update(**changes)
    return updated == 1


def approve_generated_content(
    *,
    action_id,
    temporary_content_id,
    requester_user_id=None,
    using=DEFAULT_DB_ALIAS,
) -> Action:
    """
    Commit a staged candidate into the Action as its final result.

    Checks, in order: the Action exists; it is not already approved (an
    approved Action is returned unchanged); the requester is the creator or a
    member of the Action's team; the TemporaryContent exists and belongs to
    this Action. The TemporaryContent is soft-expired rather than deleted.

    Raises:
        ActionNotFound, ActionPermissionDenied, TemporaryContentNotFound,
        TemporaryContentMismatch
    """
    ensure_in_transaction(using)

    action = _load_action(action_id, using)
    if action.approved:
        logger.info(f"Action já estava aprovada: {action.pk}")
        return action

    _check_requester(
        action, requester_user_id, 'Sem permissão para aprovar esta ação', using)

    temp = _get_or_none(TemporaryContent, temporary_content_id, using)
    if temp is None:
        raise TemporaryContentNotFound()
    if temp.action_id != action.pk:
        raise TemporaryContentMismatch()

    result = CreateContentResult(
        image_url=temp.image_url,
        title=temp.title,
        body=temp.body,
        hashtags=list(temp.hashtags or []),
    ).to_dict()

    if not _commit_approval(action, using, result=result):
        logger.info(f"Aprovação concorrente detectada para ação {action.pk}")
        action.refresh_from_db(using=using)
        return action

    temp.soft_expire(using=using)
    transaction.on_commit(lambda: _publish_approval(action), using=using)

    action.refresh_from_db(using=using)
    logger.info(f"Conteúdo aprovado para ação {action.pk}")
    return action


def approve_action(*, action_id, requester_user_id=None, using=DEFAULT_DB_ALIAS) -> Action:
    """Approve an Action keeping the result already stored on it."""
    ensure_in_transaction(using)

    action = _load_action(action_id, using)
    if action.approved:
        logger.info(f"Action já estava aprovada: {action.pk}")
        return action

    _check_requester(
        action, requester_user_id, 'Sem permissão para aprovar esta ação', using)

    if not _commit_approval(action, using):
        logger.info(f"Aprovação concorrente detectada para ação {action.pk}")
        action.refresh_from_db(using=using)
        return action

    transaction.on_commit(lambda: _publish_approval(action), using=using)

    action.refresh_from_db(using=using)
    logger.info(f"Conteúdo aprovado para ação {action.pk}")
    return action


def request_new_generation(
    *,
    action_id,
    requester_user_id=None,
    new_image_url: Optional[str] = None,
    new_title: Optional[str] = None,
    new_body: Optional[str] = None,
    new_hashtags: Optional[List[str]] = None,
    using=DEFAULT_DB_ALIAS,
) -> RevisionResult:
    """
    Stage a new candidate for an Action and count one more revision.

    Previous TemporaryContent rows of the Action are removed first so at most
    one candidate is active. Missing fields are stored as empty values.
    `approved` is left untouched.

    Raises:
        ActionNotFound, ActionPermissionDenied
    """
    ensure_in_transaction(using)

    action = _load_action(action_id, using)
    _check_requester(
        action, requester_user_id, 'Sem permissão para revisar esta ação', using)

    TemporaryContent.objects.using(using).filter(action_id=action.pk).delete()

    Action.objects.using(using).filter(pk=action.pk).update(
        status=ActionStatus.IN_REVIEW,
        revisions=F('revisions') + 1,
        updated_at=timezone.now(),
    )
    action.refresh_from_db(using=using)

    temp = TemporaryContent(
        action=action,
        user_id=requester_user_id or action.user_id,
        team_id=action.team_id,
        image_url=new_image_url or '',
        title=new_title or '',
        body=new_body or '',
        hashtags=list(new_hashtags or []),
        revisions=action.revisions,
    )
    temp.save(using=using)

    logger.info(f"Revisão criada para ação {action.pk}, TemporaryContent: {temp.pk}")
    return RevisionResult(action=action, temporary_content=temp)
