# taxonomy/management/commands/reslug_ascii.py
from django.core.management.base import BaseCommand, CommandError

from taxonomy.errors import NoTaxonomiesFound
from taxonomy.services import DjangoTermStore, Mode, reconcile


class Command(BaseCommand):
    help = "Перегенерить слаги терминов из имён без акцентов (é → e)"

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Только показать, что будет изменено.")
        parser.add_argument("--apply", action="store_true", help="Применить изменения к БД.")

    def handle(self, *args, **opts):
        dry = opts["dry_run"]
        apply_changes = opts["apply"]

        if not dry and not apply_changes:
            self.stdout.write(self.style.WARNING("Передайте --dry-run (предпросмотр) или --apply (применить)."))
            return
        if dry and apply_changes:
            raise CommandError("--dry-run и --apply вместе не работают.")

        mode = Mode.PREVIEW if dry else Mode.APPLY
        try:
            result = reconcile(DjangoTermStore(), mode=mode)
        except NoTaxonomiesFound as e:
            raise CommandError(f"Нет таксономий для обработки: {e}") from e

        if result.changes:
            self.stdout.write(self.style.NOTICE("План изменения слагов:" if dry else "Изменённые слаги:"))
            for c in result.changes:
                self.stdout.write(f"{c.taxonomy} | {c.term_id:>4} | {c.name} | {c.old_slug} => {c.new_slug}")

        for f in result.failures:
            where = f"{f.taxonomy}" if f.term_id is None else f"{f.taxonomy} #{f.term_id}"
            self.stdout.write(self.style.ERROR(f"Ошибка [{where}]: {f.message}"))

        if dry:
            if result.changes:
                self.stdout.write(self.style.SUCCESS(
                    f"DRY-RUN завершён. Будет обновлено: {len(result.changes)}. БД не изменялась."
                ))
            else:
                self.stdout.write(self.style.SUCCESS("DRY-RUN завершён. Изменений не требуется."))
            return

        self.stdout.write(self.style.SUCCESS(f"Готово. Обновлено терминов: {result.updated}"))
