import random

from django.core.management.base import BaseCommand
from django.utils.text import slugify
from faker import Faker

from taxonomy.models import Taxonomy, Term

fake = Faker("fr_FR")

# name: (label, hierarchical)
TAXONOMIES = {
    "category": ("Рубрики", True),
    "post-tag": ("Метки", False),
    "product-brand": ("Бренды", False),
    # служебные, пересчёт их не трогает
    "menu-navigation": ("Меню", False),
    "link-category": ("Категории ссылок", False),
    "post-format-internal": ("Форматы записей", False),
}

ROOT_CATS = [
    ("Actualités", ["Économie", "Société", "Région"]),
    ("Cuisine & Café", ["Pâtisserie", "Crème brûlée", "Boissons"]),
    ("Éducation", ["École primaire", "Lycée", "Université"]),
]

TAGS = ["Déjà-vu", "À la une", "Noël", "Très populaire", "Reçu", "Señor", "Ça marche"]


def legacy_slug(base, existing_qs):
    """Слаг «как было»: с акцентами, но уникальный в таксономии."""
    s = slugify(base, allow_unicode=True) or "term"
    original = s
    i = 2
    while existing_qs.filter(slug=s).exists():
        s = f"{original}-{i}"
        i += 1
    return s


class Command(BaseCommand):
    help = "Генерит тестовые таксономии и термины с акцентами в именах и слагах"

    def add_arguments(self, parser):
        parser.add_argument("--terms", type=int, default=30, help="Сколько случайных брендов создать")
        parser.add_argument("--fresh", action="store_true", help="Очистить таксономии перед генерацией")

    def handle(self, *args, **opts):
        terms_count = max(0, int(opts["terms"]))

        if opts["fresh"]:
            self.stdout.write("💣 Чищу данные…")
            Term.objects.all().delete()
            Taxonomy.objects.all().delete()

        self.stdout.write("📚 Таксономии…")
        tax = {}
        for name, (label, hierarchical) in TAXONOMIES.items():
            tax[name], _ = Taxonomy.objects.get_or_create(
                name=name, defaults={"label": label, "hierarchical": hierarchical},
            )

        self.stdout.write("🌲 Рубрики…")
        category_qs = Term.objects.filter(taxonomy=tax["category"])
        # повторный запуск без --fresh дублей не создаёт: ищем по (таксономия, имя, родитель)
        for root_name, children in ROOT_CATS:
            root, _ = Term.objects.get_or_create(
                taxonomy=tax["category"],
                name=root_name,
                parent=None,
                defaults={"slug": legacy_slug(root_name, category_qs), "count": random.randint(0, 40)},
            )
            for child in children:
                Term.objects.get_or_create(
                    taxonomy=tax["category"],
                    name=child,
                    parent=root,
                    defaults={"slug": legacy_slug(child, category_qs), "count": random.randint(0, 20)},
                )

        self.stdout.write("🏷 Метки…")
        tag_qs = Term.objects.filter(taxonomy=tax["post-tag"])
        for t in TAGS:
            if not tag_qs.filter(name=t).exists():
                Term.objects.create(taxonomy=tax["post-tag"], name=t, slug=legacy_slug(t, tag_qs))

        self.stdout.write(f"🏭 Бренды: {terms_count} шт…")
        brand_qs = Term.objects.filter(taxonomy=tax["product-brand"])
        for _ in range(terms_count):
            name = fake.company()
            Term.objects.create(
                taxonomy=tax["product-brand"],
                name=name,
                slug=legacy_slug(name, brand_qs),
                description=fake.sentence(),
                count=random.randint(0, 10),
            )

        self.stdout.write("🧭 Меню…")
        menu_qs = Term.objects.filter(taxonomy=tax["menu-navigation"])
        if not menu_qs.exists():
            Term.objects.create(taxonomy=tax["menu-navigation"], name="Menu principal", slug="menu-principal")

        self.stdout.write(self.style.SUCCESS(f"Готово. Терминов в базе: {Term.objects.count()}"))
