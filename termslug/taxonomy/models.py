from django.db import models
from django.forms import ValidationError
from mptt.models import MPTTModel, TreeForeignKey


class Taxonomy(models.Model):
    name = models.SlugField("Идентификатор", max_length=64, unique=True)
    label = models.CharField("Название", max_length=255, blank=True)
    hierarchical = models.BooleanField("Иерархическая", default=False)

    class Meta:
        # порядок регистрации = порядок обхода
        ordering = ("id",)
        verbose_name = "Таксономия"
        verbose_name_plural = "Таксономии"

    def __str__(self):
        return self.label or self.name


class Term(MPTTModel):
    taxonomy = models.ForeignKey(
        Taxonomy,
        on_delete=models.CASCADE,
        related_name="terms",
        verbose_name="Таксономия",
    )
    name = models.CharField("Название", max_length=255)
    # allow_unicode: старые слаги могут быть с акцентами, их и чиним
    slug = models.SlugField("Слаг", max_length=255, allow_unicode=True)
    description = models.TextField("Описание", blank=True)
    count = models.PositiveIntegerField("Кол-во записей", default=0)
    parent = TreeForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name="Родительский термин"
    )

    class MPTTMeta:
        order_insertion_by = ['name']

    class Meta:
        verbose_name = "Термин"
        verbose_name_plural = "Термины"
        constraints = [
            models.UniqueConstraint(fields=("taxonomy", "slug"), name="uniq_term_slug_per_taxonomy"),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        if self.parent_id and self.parent.taxonomy_id != self.taxonomy_id:
            raise ValidationError("Родитель должен быть из той же таксономии.")
