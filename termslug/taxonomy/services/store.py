# taxonomy/services/store.py
"""
Хранилище терминов глазами пересчёта слагов.

Ядро (reconciler) не знает про ORM: оно работает с протоколом TermStore.
DjangoTermStore - реализация поверх моделей Taxonomy/Term,
в тестах её подменяет in-memory фейк.
"""
from dataclasses import dataclass
from typing import Collection, Optional, Protocol, Sequence

from django.db import DatabaseError, IntegrityError, transaction

from taxonomy.errors import TermStoreError
from taxonomy.models import Taxonomy, Term
from taxonomy.utils.slug import ascii_slug


@dataclass(frozen=True)
class TermRecord:
    id: int
    name: str
    slug: str
    taxonomy: str
    parent: Optional[int] = None


class TermStore(Protocol):
    def list_taxonomies(self) -> Sequence[str]: ...

    def taxonomy_exists(self, name: str) -> bool: ...

    def list_terms(self, taxonomy: str) -> Sequence[TermRecord]: ...

    def slugify(self, text: str) -> str: ...

    def unique_slug(
        self,
        candidate: str,
        term: TermRecord,
        reserved: Collection[str] = (),
        released: Collection[str] = (),
    ) -> str: ...

    def update_slug(self, term_id: int, taxonomy: str, slug: str) -> None: ...


def _to_record(term: Term, taxonomy: str) -> TermRecord:
    return TermRecord(
        id=term.pk,
        name=term.name,
        slug=term.slug,
        taxonomy=taxonomy,
        parent=term.parent_id,
    )


class DjangoTermStore:
    def list_taxonomies(self):
        return list(Taxonomy.objects.order_by("id").values_list("name", flat=True))

    def taxonomy_exists(self, name):
        return Taxonomy.objects.filter(name=name).exists()

    def list_terms(self, taxonomy):
        # пустые термины (count=0) не отфильтровываем
        try:
            if not Taxonomy.objects.filter(name=taxonomy).exists():
                raise TermStoreError(f"taxonomy {taxonomy!r} is not registered", taxonomy=taxonomy)
            terms = list(Term.objects.filter(taxonomy__name=taxonomy).order_by("name", "id"))
        except DatabaseError as e:
            raise TermStoreError(str(e), taxonomy=taxonomy) from e
        return [_to_record(t, taxonomy) for t in terms]

    def slugify(self, text):
        return ascii_slug(text)

    def unique_slug(self, candidate, term, reserved=(), released=()):
        """
        Свободен ли slug - проверяем в пределах таксономии, исключая сам термин.
        reserved - слаги, уже выданные в текущем прогоне, заняты всегда.
        released - старые слаги переименованных терминов: запись в базе
        по ним не считается занятой.
        Конфликт: сначала дописываем слаги предков (только для иерархических
        таксономий), затем числовой суффикс: base-2, base-3, ...
        """
        siblings = Term.objects.filter(taxonomy__name=term.taxonomy).exclude(pk=term.id)

        def taken(s):
            if s in reserved:
                return True
            return s not in released and siblings.filter(slug=s).exists()

        if not taken(candidate):
            return candidate

        slug = candidate
        if term.parent and Taxonomy.objects.filter(name=term.taxonomy, hierarchical=True).exists():
            parent = Term.objects.filter(pk=term.parent).first()
            ancestors = parent.get_ancestors(ascending=True, include_self=True) if parent else []
            for ancestor in ancestors:
                slug = f"{slug}-{ancestor.slug}"
                if not taken(slug):
                    return slug

        base = slug
        i = 2
        s = f"{base}-{i}"
        while taken(s):
            i += 1
            s = f"{base}-{i}"
        return s

    def update_slug(self, term_id, taxonomy, slug):
        try:
            with transaction.atomic():
                term = Term.objects.filter(pk=term_id, taxonomy__name=taxonomy).first()
                if term is None:
                    raise TermStoreError(
                        f"term {term_id} not found in {taxonomy!r}", taxonomy=taxonomy, term_id=term_id,
                    )
                term.slug = slug
                term.save(update_fields=["slug"])
        except IntegrityError as e:
            raise TermStoreError(
                f"slug {slug!r} is already taken: {e}", taxonomy=taxonomy, term_id=term_id,
            ) from e
        except DatabaseError as e:
            raise TermStoreError(str(e), taxonomy=taxonomy, term_id=term_id) from e
