from django.core.management.base import BaseCommand

from Teams.models import Team
from Teams.services.team_counter_service import TeamCounterService


class Command(BaseCommand):
    help = "Recalcula os contadores de conteúdos aprovados e marcas das equipes."

    def add_arguments(self, parser):
        parser.add_argument(
            "--team-id",
            type=str,
            default=None,
            help="Recalcular apenas a equipe informada (default: todas).",
        )

    def handle(self, *args, **options):
        team_id = options["team_id"]

        if team_id:
            if not Team.objects.filter(id=team_id).exists():
                self.stderr.write(self.style.ERROR(f"Equipe {team_id} não encontrada"))
                return

            counters = TeamCounterService.recalculate_team_counters(team_id)
            self.stdout.write(
                self.style.SUCCESS(
                    f"Equipe {team_id}: {counters['total_contents']} conteúdos, "
                    f"{counters['total_brands']} marcas."
                )
            )
            return

        results = TeamCounterService.initialize_all_team_counters()
        for item in results:
            self.stdout.write(
                f"Equipe {item['team_id']}: {item['total_contents']} conteúdos, "
                f"{item['total_brands']} marcas."
            )
        self.stdout.write(
            self.style.SUCCESS(f"Contadores inicializados para {len(results)} equipes.")
        )
