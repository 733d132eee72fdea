# taxonomy/services/reconciler.py
import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from taxonomy.errors import NoTaxonomiesFound, TermStoreError
from taxonomy.utils.slug import fold_accents

from .store import TermStore

log = logging.getLogger(__name__)

# служебные таксономии, их слаги не трогаем никогда
EXCLUDED_TAXONOMIES = frozenset({"menu-navigation", "link-category", "post-format-internal"})


class Mode(str, enum.Enum):
    APPLY = "apply"
    PREVIEW = "preview"


@dataclass(frozen=True)
class ChangeRecord:
    taxonomy: str
    term_id: int
    name: str
    old_slug: str
    new_slug: str


@dataclass(frozen=True)
class ReconcileFailure:
    taxonomy: str
    message: str
    term_id: Optional[int] = None


@dataclass
class ReconcileResult:
    mode: Mode
    updated: int = 0
    scanned: int = 0
    changes: List[ChangeRecord] = field(default_factory=list)
    failures: List[ReconcileFailure] = field(default_factory=list)


def reconcile(store: TermStore, mode: Mode = Mode.APPLY) -> ReconcileResult:
    """
    Пересчитать слаги всех терминов из имён без акцентов.

    APPLY - пишем изменившиеся слаги и считаем успешные записи.
    PREVIEW - ничего не пишем, только собираем ChangeRecord.
    Ошибки отдельной таксономии/термина не валят прогон: логируем и идём дальше.
    """
    mode = Mode(mode)
    taxonomies = [t for t in store.list_taxonomies() if t not in EXCLUDED_TAXONOMIES]
    if not taxonomies:
        log.error("reconcile: no taxonomies found")
        raise NoTaxonomiesFound()

    result = ReconcileResult(mode=mode)

    for taxonomy in taxonomies:
        if not store.taxonomy_exists(taxonomy):
            log.warning("reconcile: taxonomy %s vanished, skipping", taxonomy)
            continue

        try:
            terms = store.list_terms(taxonomy)
        except TermStoreError as e:
            log.error("reconcile: error getting terms for taxonomy %s: %s", taxonomy, e)
            result.failures.append(ReconcileFailure(taxonomy=taxonomy, message=str(e)))
            continue

        # claimed - слаги, выданные в этом прогоне (в PREVIEW в базу они не попадают);
        # released - старые слаги уже переименованных терминов, в базе они больше не заняты
        claimed = set()
        released = set()
        for term in terms:
            result.scanned += 1
            candidate = store.slugify(fold_accents(term.name))
            if not candidate:
                log.warning("reconcile: term %s (%s) gives an empty slug, skipping", term.id, term.name)
                continue

            new_slug = store.unique_slug(candidate, term, reserved=claimed, released=released)

            if new_slug == term.slug:
                claimed.add(new_slug)
                continue

            change = ChangeRecord(
                taxonomy=taxonomy,
                term_id=term.id,
                name=term.name,
                old_slug=term.slug,
                new_slug=new_slug,
            )
            if mode is Mode.PREVIEW:
                claimed.add(new_slug)
                released.add(term.slug)
                result.changes.append(change)
                continue

            try:
                store.update_slug(term.id, taxonomy, new_slug)
            except TermStoreError as e:
                log.error(
                    "reconcile: failed to update term %s (%s) in taxonomy %s: %s",
                    term.id, term.name, taxonomy, e,
                )
                result.failures.append(ReconcileFailure(taxonomy=taxonomy, message=str(e), term_id=term.id))
                continue

            # несостоявшаяся запись слаг не занимает
            claimed.add(new_slug)
            released.add(term.slug)
            result.updated += 1
            result.changes.append(change)
            log.info("Updated slug for term %s (%s): %s -> %s", term.id, term.name, term.slug, new_slug)

    if mode is Mode.APPLY:
        log.info("reconcile: finished, total terms updated: %s", result.updated)
    else:
        log.info("reconcile: preview finished, %s terms would change", len(result.changes))
    return result
