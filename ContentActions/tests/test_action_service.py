"""
Testes do serviço de ciclo de vida das ações de conteúdo.

Estes testes verificam:
- Aprovação de conteúdo gerado (ordem das validações e idempotência)
- Solicitação de nova geração (revisões e conteúdo temporário único)
- Atualização do contador da equipe somente após o commit
"""

import uuid
from datetime import timedelta
from unittest.mock import patch

from django.db.transaction import TransactionManagementError
from django.test import TestCase, TransactionTestCase
from django.utils import timezone

from ContentActions.exceptions import (
    ActionNotFound,
    ActionPermissionDenied,
    TemporaryContentMismatch,
    TemporaryContentNotFound,
)
from ContentActions.models import Action, ActionStatus, TemporaryContent
from ContentActions.services.action_service import (
    approve_action,
    approve_generated_content,
    request_new_generation,
)
from ContentActions.services.transaction_service import lifecycle_transaction

from .helpers import (
    create_action,
    create_brand,
    create_team,
    create_temporary_content,
    create_test_user,
)


class LifecycleTestMixin:
    """Cenário base: equipe com criador, membro, marca e uma ação em revisão"""

    def setUp(self):
        self.team = create_team("TEAM-A")
        self.other_team = create_team("TEAM-B")
        self.creator = create_test_user("criador@example.com", team=self.team)
        self.member = create_test_user("membro@example.com", team=self.team)
        self.outsider = create_test_user("externo@example.com", team=self.other_team)
        self.brand = create_brand(self.team)
        self.action = create_action(self.team, self.creator, self.brand)

    def approve(self, action_id, temporary_content_id, requester_user_id=None):
        with lifecycle_transaction() as using:
            return approve_generated_content(
                action_id=action_id,
                temporary_content_id=temporary_content_id,
                requester_user_id=requester_user_id,
                using=using,
            )

    def request_revision(self, action_id, requester_user_id=None, **kwargs):
        with lifecycle_transaction() as using:
            return request_new_generation(
                action_id=action_id,
                requester_user_id=requester_user_id,
                using=using,
                **kwargs
            )


class ApproveGeneratedContentTestCase(LifecycleTestMixin, TestCase):
    """Testes para approve_generated_content"""

    def setUp(self):
        super().setUp()
        self.temp = create_temporary_content(
            self.action,
            self.creator,
            image_url="img",
            title="t",
            body="b",
            hashtags=["#a"],
        )

    def test_approval_commits_temporary_content_as_result(self):
        """Teste: o conteúdo temporário vira o resultado final da ação"""
        action = self.approve(self.action.id, self.temp.id, self.creator.id)

        self.assertTrue(action.approved)
        self.assertEqual(action.status, ActionStatus.APPROVED)
        self.assertEqual(action.result, {
            "imageUrl": "img",
            "title": "t",
            "body": "b",
            "hashtags": ["#a"],
        })

        stored = Action.objects.get(id=self.action.id)
        self.assertTrue(stored.approved)
        self.assertEqual(stored.result["title"], "t")

    def test_approval_soft_expires_temporary_content(self):
        """Teste: o conteúdo temporário não é apagado, apenas expira em breve"""
        before = timezone.now()
        self.approve(self.action.id, self.temp.id, self.creator.id)

        self.temp.refresh_from_db()
        self.assertGreater(self.temp.expires_at, before)
        self.assertLessEqual(
            self.temp.expires_at, timezone.now() + timedelta(minutes=5))

    def test_approval_increments_team_counter_after_commit(self):
        """Teste: o contador da equipe só muda quando o commit acontece"""
        with self.captureOnCommitCallbacks(execute=False) as callbacks:
            self.approve(self.action.id, self.temp.id, self.creator.id)

        self.team.refresh_from_db()
        self.assertEqual(self.team.total_contents, 0)
        self.assertEqual(len(callbacks), 1)

        callbacks[0]()
        self.team.refresh_from_db()
        self.assertEqual(self.team.total_contents, 1)

    def test_second_approval_is_a_noop(self):
        """Teste: aprovar duas vezes não altera nada nem conta de novo"""
        with self.captureOnCommitCallbacks(execute=True):
            first = self.approve(self.action.id, self.temp.id, self.creator.id)

        other_temp = create_temporary_content(
            self.action, self.creator, title="outro título")
        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            second = self.approve(self.action.id, other_temp.id, self.creator.id)

        self.assertEqual(len(callbacks), 0)
        self.assertEqual(second.result, first.result)
        self.assertEqual(second.updated_at, first.updated_at)
        self.team.refresh_from_db()
        self.assertEqual(self.team.total_contents, 1)

    def test_approved_action_is_returned_before_permission_check(self):
        """Teste: ação já aprovada é devolvida mesmo para quem não teria permissão"""
        Action.objects.filter(id=self.action.id).update(
            approved=True, status=ActionStatus.APPROVED)

        action = self.approve(self.action.id, self.temp.id, self.outsider.id)

        self.assertTrue(action.approved)

    def test_member_of_team_can_approve(self):
        """Teste: membro da equipe que não é o criador pode aprovar"""
        action = self.approve(self.action.id, self.temp.id, self.member.id)
        self.assertTrue(action.approved)

    def test_approval_without_requester_is_allowed(self):
        """Teste: sem solicitante não há verificação de permissão"""
        action = self.approve(self.action.id, self.temp.id)
        self.assertTrue(action.approved)

    def test_outsider_cannot_approve(self):
        """Teste: usuário de outra equipe recebe Forbidden e nada muda"""
        with self.assertRaises(ActionPermissionDenied) as ctx:
            self.approve(self.action.id, self.temp.id, self.outsider.id)

        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.message, "Sem permissão para aprovar esta ação")
        self.action.refresh_from_db()
        self.assertFalse(self.action.approved)
        self.assertEqual(self.action.status, ActionStatus.IN_REVIEW)

    def test_missing_action_raises_not_found(self):
        """Teste: ação inexistente"""
        with self.assertRaises(ActionNotFound) as ctx:
            self.approve(uuid.uuid4(), self.temp.id, self.creator.id)
        self.assertEqual(ctx.exception.message, "Action não encontrada")

    def test_malformed_action_id_raises_not_found(self):
        """Teste: identificador inválido é tratado como inexistente"""
        with self.assertRaises(ActionNotFound):
            self.approve("nao-e-um-uuid", self.temp.id, self.creator.id)

    def test_missing_temporary_content_raises_not_found(self):
        """Teste: conteúdo temporário inexistente"""
        with self.assertRaises(TemporaryContentNotFound):
            self.approve(self.action.id, uuid.uuid4(), self.creator.id)

        self.action.refresh_from_db()
        self.assertFalse(self.action.approved)

    def test_temporary_content_of_another_action_conflicts(self):
        """Teste: conteúdo temporário de outra ação resulta em Conflict"""
        other_action = create_action(self.team, self.creator, self.brand)
        other_temp = create_temporary_content(other_action, self.creator)

        with self.assertRaises(TemporaryContentMismatch) as ctx:
            self.approve(self.action.id, other_temp.id, self.creator.id)

        self.assertEqual(ctx.exception.status_code, 409)
        self.action.refresh_from_db()
        self.assertFalse(self.action.approved)

    def test_temporary_content_without_action_conflicts(self):
        """Teste: conteúdo temporário sem ação associada também não corresponde"""
        loose_temp = create_temporary_content(None, self.creator, team=self.team)

        with self.assertRaises(TemporaryContentMismatch):
            self.approve(self.action.id, loose_temp.id, self.creator.id)

    def test_concurrent_approval_is_detected(self):
        """Teste: se outra transação aprovou antes, a chamada vira no-op"""
        stale = Action.objects.get(id=self.action.id)
        Action.objects.filter(id=self.action.id).update(
            approved=True,
            status=ActionStatus.APPROVED,
            result={"title": "vencedor"},
        )
        original_expiry = self.temp.expires_at

        with patch(
            "ContentActions.services.action_service._load_action",
            return_value=stale,
        ):
            with self.captureOnCommitCallbacks(execute=True) as callbacks:
                action = self.approve(self.action.id, self.temp.id, self.creator.id)

        self.assertEqual(len(callbacks), 0)
        self.assertTrue(action.approved)
        self.assertEqual(action.result, {"title": "vencedor"})
        self.temp.refresh_from_db()
        self.assertEqual(self.temp.expires_at, original_expiry)


class ApproveActionTestCase(LifecycleTestMixin, TestCase):
    """Testes para approve_action (aprovação sem conteúdo temporário)"""

    def test_approves_stored_result(self):
        """Teste: mantém o resultado já gravado na ação"""
        with self.captureOnCommitCallbacks(execute=True):
            with lifecycle_transaction() as using:
                action = approve_action(
                    action_id=self.action.id,
                    requester_user_id=self.member.id,
                    using=using,
                )

        self.assertTrue(action.approved)
        self.assertEqual(action.result["title"], "Rascunho")
        self.team.refresh_from_db()
        self.assertEqual(self.team.total_contents, 1)

    def test_outsider_cannot_approve(self):
        """Teste: usuário de outra equipe recebe Forbidden"""
        with self.assertRaises(ActionPermissionDenied):
            with lifecycle_transaction() as using:
                approve_action(
                    action_id=self.action.id,
                    requester_user_id=self.outsider.id,
                    using=using,
                )


class RequestNewGenerationTestCase(LifecycleTestMixin, TestCase):
    """Testes para request_new_generation"""

    def test_revision_increments_counter_and_stages_candidate(self):
        """Teste: revisões +1, status em revisão e novo conteúdo temporário"""
        revision = self.request_revision(
            self.action.id,
            self.member.id,
            new_image_url="nova.png",
            new_title="Novo título",
            new_body="Novo corpo",
            new_hashtags=["#novo"],
        )

        action = revision.action
        temp = revision.temporary_content
        self.assertEqual(action.revisions, 1)
        self.assertEqual(action.status, ActionStatus.IN_REVIEW)
        self.assertEqual(temp.action_id, action.id)
        self.assertEqual(temp.user_id, self.member.id)
        self.assertEqual(temp.team_id, self.team.id)
        self.assertEqual(temp.image_url, "nova.png")
        self.assertEqual(temp.title, "Novo título")
        self.assertEqual(temp.body, "Novo corpo")
        self.assertEqual(temp.hashtags, ["#novo"])
        self.assertEqual(temp.revisions, 1)

    def test_missing_fields_default_to_empty_values(self):
        """Teste: campos ausentes viram valores vazios"""
        revision = self.request_revision(self.action.id, self.creator.id)

        temp = revision.temporary_content
        self.assertEqual(temp.image_url, "")
        self.assertEqual(temp.title, "")
        self.assertEqual(temp.body, "")
        self.assertEqual(temp.hashtags, [])

    def test_without_requester_candidate_belongs_to_creator(self):
        """Teste: sem solicitante o conteúdo temporário fica com o criador"""
        revision = self.request_revision(self.action.id)
        self.assertEqual(revision.temporary_content.user_id, self.creator.id)

    def test_only_one_candidate_remains_per_action(self):
        """Teste: revisões sucessivas mantêm um único conteúdo temporário"""
        create_temporary_content(self.action, self.creator)

        self.request_revision(self.action.id, self.creator.id, new_title="v1")
        revision = self.request_revision(self.action.id, self.creator.id, new_title="v2")

        temps = TemporaryContent.objects.filter(action_id=self.action.id)
        self.assertEqual(temps.count(), 1)
        self.assertEqual(temps.get().title, "v2")
        self.assertEqual(revision.action.revisions, 2)
        self.assertEqual(revision.temporary_content.revisions, 2)

    def test_revision_keeps_approved_flag(self):
        """Teste: pedir revisão de ação aprovada não desfaz a aprovação"""
        Action.objects.filter(id=self.action.id).update(
            approved=True, status=ActionStatus.APPROVED)

        revision = self.request_revision(self.action.id, self.creator.id)

        self.assertTrue(revision.action.approved)
        self.assertEqual(revision.action.status, ActionStatus.IN_REVIEW)

    def test_revision_does_not_touch_team_counter(self):
        """Teste: revisão não dispara atualização de contador"""
        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            self.request_revision(self.action.id, self.creator.id)

        self.assertEqual(len(callbacks), 0)

    def test_outsider_cannot_request_revision(self):
        """Teste: usuário de outra equipe recebe Forbidden e nada muda"""
        existing = create_temporary_content(self.action, self.creator)

        with self.assertRaises(ActionPermissionDenied) as ctx:
            self.request_revision(self.action.id, self.outsider.id)

        self.assertEqual(ctx.exception.message, "Sem permissão para revisar esta ação")
        self.action.refresh_from_db()
        self.assertEqual(self.action.revisions, 0)
        self.assertTrue(TemporaryContent.objects.filter(id=existing.id).exists())

    def test_missing_action_raises_not_found(self):
        """Teste: ação inexistente"""
        with self.assertRaises(ActionNotFound):
            self.request_revision(uuid.uuid4(), self.creator.id)

    def test_revision_then_approval(self):
        """Teste: fluxo completo de revisão seguida de aprovação"""
        revision = self.request_revision(
            self.action.id, self.creator.id, new_title="Final", new_hashtags=["#fim"])

        action = self.approve(
            self.action.id, revision.temporary_content.id, self.creator.id)

        self.assertTrue(action.approved)
        self.assertEqual(action.revisions, 1)
        self.assertEqual(action.result["title"], "Final")
        self.assertEqual(action.result["hashtags"], ["#fim"])


class LifecycleRollbackTestCase(LifecycleTestMixin, TestCase):
    """Falhas dentro da transação desfazem tudo o que já foi escrito"""

    def test_revision_failure_rolls_back(self):
        """Teste: erro ao gravar o novo candidato desfaz revisões e remoções"""
        previous = create_temporary_content(self.action, self.creator)

        with patch.object(TemporaryContent, "save", side_effect=RuntimeError("db down")):
            with self.assertRaises(RuntimeError):
                self.request_revision(self.action.id, self.creator.id, new_title="v1")

        self.action.refresh_from_db()
        self.assertEqual(self.action.revisions, 0)
        self.assertTrue(TemporaryContent.objects.filter(id=previous.id).exists())
        self.assertEqual(TemporaryContent.objects.filter(action=self.action).count(), 1)

    def test_approval_failure_rolls_back(self):
        """Teste: erro ao expirar o candidato desfaz a aprovação"""
        temp = create_temporary_content(self.action, self.creator, title="Final")

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            with patch.object(
                TemporaryContent, "soft_expire", side_effect=RuntimeError("db down")
            ):
                with self.assertRaises(RuntimeError):
                    self.approve(self.action.id, temp.id, self.creator.id)

        self.assertEqual(len(callbacks), 0)
        self.action.refresh_from_db()
        self.assertFalse(self.action.approved)
        self.assertEqual(self.action.status, ActionStatus.IN_REVIEW)
        self.assertEqual(self.action.result["title"], "Rascunho")
        self.team.refresh_from_db()
        self.assertEqual(self.team.total_contents, 0)


class LifecycleTransactionRequiredTestCase(TransactionTestCase):
    """Operações do ciclo de vida exigem uma transação aberta"""

    def test_approve_outside_transaction_fails(self):
        """Teste: aprovar fora de lifecycle_transaction é erro de programação"""
        with self.assertRaises(TransactionManagementError):
            approve_generated_content(
                action_id=uuid.uuid4(),
                temporary_content_id=uuid.uuid4(),
            )

    def test_revision_outside_transaction_fails(self):
        """Teste: revisar fora de lifecycle_transaction é erro de programação"""
        with self.assertRaises(TransactionManagementError):
            request_new_generation(action_id=uuid.uuid4())

    def test_lifecycle_transaction_yields_alias(self):
        """Teste: o contexto entrega o alias do banco usado"""
        with lifecycle_transaction() as using:
            self.assertEqual(using, "default")
