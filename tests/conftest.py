"""Общие фикстуры: in-memory хранилище терминов и фабрики для ORM-тестов."""

import pytest

from taxonomy.errors import TermStoreError
from taxonomy.models import Taxonomy, Term
from taxonomy.services import TermRecord
from taxonomy.utils.slug import ascii_slug


class InMemoryTermStore:
    """
    Фейк TermStore: термины в словаре, плюс журналы вызовов,
    чтобы проверять, что и с какими аргументами дергало ядро.
    """

    def __init__(self, terms_by_taxonomy=None, *, vanished=(), failing_taxonomies=(), failing_updates=()):
        self.terms = {tax: list(terms) for tax, terms in (terms_by_taxonomy or {}).items()}
        self.vanished = set(vanished)
        self.failing_taxonomies = set(failing_taxonomies)
        self.failing_updates = set(failing_updates)
        self.list_terms_calls = []
        self.update_calls = []

    def add(self, taxonomy, term_id, name, slug, parent=None):
        self.terms.setdefault(taxonomy, []).append(
            TermRecord(id=term_id, name=name, slug=slug, taxonomy=taxonomy, parent=parent)
        )

    def list_taxonomies(self):
        return list(self.terms)

    def taxonomy_exists(self, name):
        return name in self.terms and name not in self.vanished

    def list_terms(self, taxonomy):
        self.list_terms_calls.append(taxonomy)
        if taxonomy in self.failing_taxonomies:
            raise TermStoreError("boom", taxonomy=taxonomy)
        return list(self.terms.get(taxonomy, []))

    def slugify(self, text):
        return ascii_slug(text)

    def unique_slug(self, candidate, term, reserved=(), released=()):
        taken = {
            t.slug for t in self.terms.get(term.taxonomy, [])
            if t.id != term.id and t.slug not in released
        } | set(reserved)
        if candidate not in taken:
            return candidate
        i = 2
        while f"{candidate}-{i}" in taken:
            i += 1
        return f"{candidate}-{i}"

    def update_slug(self, term_id, taxonomy, slug):
        self.update_calls.append((term_id, taxonomy, slug))
        if term_id in self.failing_updates:
            raise TermStoreError("write failed", taxonomy=taxonomy, term_id=term_id)
        self.terms[taxonomy] = [
            TermRecord(id=t.id, name=t.name, slug=slug, taxonomy=t.taxonomy, parent=t.parent)
            if t.id == term_id else t
            for t in self.terms[taxonomy]
        ]

    def slug_of(self, taxonomy, term_id):
        return next(t.slug for t in self.terms[taxonomy] if t.id == term_id)


@pytest.fixture
def memory_store():
    return InMemoryTermStore()


@pytest.fixture
def make_store():
    return InMemoryTermStore


@pytest.fixture
def make_taxonomy(db):
    def _make(name="category", hierarchical=False, label=""):
        return Taxonomy.objects.create(name=name, hierarchical=hierarchical, label=label)
    return _make


@pytest.fixture
def make_term(db):
    def _make(taxonomy, name, slug, parent=None, count=0):
        return Term.objects.create(taxonomy=taxonomy, name=name, slug=slug, parent=parent, count=count)
    return _make
