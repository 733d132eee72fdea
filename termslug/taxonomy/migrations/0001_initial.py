import django.db.models.deletion
import mptt.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Taxonomy",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.SlugField(max_length=64, unique=True, verbose_name="Идентификатор")),
                ("label", models.CharField(blank=True, max_length=255, verbose_name="Название")),
                ("hierarchical", models.BooleanField(default=False, verbose_name="Иерархическая")),
            ],
            options={
                "verbose_name": "Таксономия",
                "verbose_name_plural": "Таксономии",
                "ordering": ("id",),
            },
        ),
        migrations.CreateModel(
            name="Term",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Название")),
                ("slug", models.SlugField(allow_unicode=True, max_length=255, verbose_name="Слаг")),
                ("description", models.TextField(blank=True, verbose_name="Описание")),
                ("count", models.PositiveIntegerField(default=0, verbose_name="Кол-во записей")),
                ("lft", models.PositiveIntegerField(editable=False)),
                ("rght", models.PositiveIntegerField(editable=False)),
                ("tree_id", models.PositiveIntegerField(db_index=True, editable=False)),
                ("level", models.PositiveIntegerField(editable=False)),
                ("parent", mptt.fields.TreeForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="children",
                    to="taxonomy.term",
                    verbose_name="Родительский термин",
                )),
                ("taxonomy", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="terms",
                    to="taxonomy.taxonomy",
                    verbose_name="Таксономия",
                )),
            ],
            options={
                "verbose_name": "Термин",
                "verbose_name_plural": "Термины",
            },
        ),
        migrations.AddConstraint(
            model_name="term",
            constraint=models.UniqueConstraint(fields=("taxonomy", "slug"), name="uniq_term_slug_per_taxonomy"),
        ),
    ]
