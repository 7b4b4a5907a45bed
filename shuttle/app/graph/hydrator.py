"""Rebuild nested entity graphs from flat, denormalized join rows.

A join such as Child x ParentChild x Parent x ChildActivity x Activity yields
one row per (child, activity) pair with the child and parent columns repeated.
``hydrate`` walks those rows once and keeps, per root id, a record of the
entity plus the ids of the related entities already attached to it, so each
logical entity is constructed exactly once no matter how many rows mention it.

Relations nest: a relation may carry its own relations (transport -> vehicle
-> owning parent, parent -> children -> activities), and the same dedup
applies at every level.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from shuttle.app.core.errors import HydrationError

Row = Mapping[str, Any]


@dataclass(frozen=True)
class Relation:
    """How to pull one related entity out of a row and hang it on its owner.

    ``key`` is the label of the related entity's id column; a null value means
    the outer join found nothing and the relation is skipped for that row.
    ``attach`` is called as ``attach(owner, related)``.
    """

    key: str
    build: Callable[[Row], Any]
    attach: Callable[[Any, Any], None]
    many: bool = False
    relations: tuple["Relation", ...] = ()


@dataclass
class _Record:
    entity: Any
    seen: dict[int, dict[Any, "_Record"]] = field(default_factory=dict)


def _absorb(record: _Record, relations: tuple[Relation, ...], row: Row) -> None:
    for index, relation in enumerate(relations):
        related_id = row.get(relation.key)
        if related_id is None:
            continue
        seen = record.seen.setdefault(index, {})
        related = seen.get(related_id)
        if related is None:
            if not relation.many and seen:
                # a to-one relation keeps the first entity it was given
                continue
            entity = relation.build(row)
            relation.attach(record.entity, entity)
            related = seen[related_id] = _Record(entity)
        _absorb(related, relation.relations, row)


def hydrate(
    rows: Iterable[Row],
    *,
    key: str,
    build: Callable[[Row], Any],
    relations: tuple[Relation, ...] = (),
) -> list:
    """Return the distinct root entities found in ``rows`` in first-seen order.

    Raises ``HydrationError`` when a row lacks the root id column, the root id
    is null, or the root builder cannot find one of its columns.
    """
    roots: dict[Any, _Record] = {}
    for row in rows:
        try:
            root_id = row[key]
        except KeyError as exc:
            raise HydrationError(f"row is missing root column {key!r}") from exc
        if root_id is None:
            raise HydrationError(f"row has a null root id in column {key!r}")
        record = roots.get(root_id)
        if record is None:
            try:
                entity = build(row)
            except KeyError as exc:
                raise HydrationError(f"row is missing root column {exc.args[0]!r}") from exc
            record = roots[root_id] = _Record(entity)
        _absorb(record, relations, row)
    return [record.entity for record in roots.values()]


def hydrate_one(
    rows: Iterable[Row],
    *,
    key: str,
    build: Callable[[Row], Any],
    relations: tuple[Relation, ...] = (),
) -> Optional[Any]:
    """Hydrate rows restricted to a single root id; ``None`` when there are none."""
    entities = hydrate(rows, key=key, build=build, relations=relations)
    return entities[0] if entities else None
