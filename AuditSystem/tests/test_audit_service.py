"""
Testes do serviço de auditoria.
"""

from unittest.mock import patch

from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase

from AuditSystem.models import AuditLog
from AuditSystem.services import AuditService
from ContentActions.tests.helpers import create_test_user


class AuditServiceTestCase(TestCase):
    """Testes para AuditService"""

    def setUp(self):
        self.user = create_test_user("auditor@example.com")
        self.factory = RequestFactory()

    def test_log_content_operation(self):
        """Teste: operação de conteúdo é registrada com o tipo de recurso padrão"""
        request = self.factory.post(
            "/api/v1/content/actions/",
            HTTP_X_FORWARDED_FOR="203.0.113.7, 10.0.0.1",
            HTTP_USER_AGENT="pytest",
        )

        log = AuditService.log_content_operation(
            user=self.user,
            action="content_approved",
            resource_id="abc",
            request=request,
            details={"temporary_content_id": "xyz"},
        )

        self.assertEqual(log.operation_category, "content")
        self.assertEqual(log.resource_type, "Action")
        self.assertEqual(log.ip_address, "203.0.113.7")
        self.assertEqual(log.user_agent, "pytest")
        self.assertEqual(log.details, {"temporary_content_id": "xyz"})
        self.assertTrue(log.request_id)

    def test_anonymous_user_is_stored_as_system(self):
        """Teste: usuário anônimo vira operação do sistema"""
        log = AuditService.log_system_operation(
            user=AnonymousUser(), action="temporary_content_cleanup")

        self.assertIsNone(log.user)
        self.assertIn("Sistema", str(log))

    def test_failure_to_write_is_not_raised(self):
        """Teste: falha na auditoria nunca quebra a operação auditada"""
        with patch.object(AuditLog.objects, "create", side_effect=RuntimeError("db down")):
            with self.assertLogs("AuditSystem.services", level="ERROR"):
                result = AuditService.log_team_operation(
                    user=self.user, action="team_counters_initialized")

        self.assertIsNone(result)
        self.assertFalse(AuditLog.objects.exists())

    def test_request_id_header_is_reused(self):
        """Teste: X-Request-ID do cliente é reaproveitado"""
        request = self.factory.post(
            "/api/v1/content/cleanup/",
            HTTP_X_REQUEST_ID="req-123",
            REMOTE_ADDR="198.51.100.4",
        )

        log = AuditService.log_system_operation(
            user=None, action="temporary_content_cleanup", request=request)

        self.assertEqual(log.request_id, "req-123")
        self.assertEqual(log.ip_address, "198.51.100.4")
