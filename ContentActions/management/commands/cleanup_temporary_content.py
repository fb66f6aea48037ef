from django.core.management.base import BaseCommand
from django.utils import timezone

from ContentActions.models import TemporaryContent
from ContentActions.services.temporary_content_service import TemporaryContentService


class Command(BaseCommand):
    help = "Remove conteúdos temporários cuja data de expiração já passou."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Não deleta nada; apenas mostra quantos seriam removidos.",
        )

    def handle(self, *args, **options):
        now = timezone.now()

        if options["dry_run"]:
            to_delete = TemporaryContent.objects.filter(expires_at__lt=now).count()
            self.stdout.write(
                self.style.WARNING(
                    f"DRY RUN: removeria {to_delete} conteúdos temporários com expires_at < {now.isoformat()}."
                )
            )
            return

        deleted = TemporaryContentService.cleanup_expired_temporary_content(now=now)
        self.stdout.write(
            self.style.SUCCESS(
                f"Removidos {deleted} registros (TemporaryContent) com expires_at < {now.isoformat()}."
            )
        )
