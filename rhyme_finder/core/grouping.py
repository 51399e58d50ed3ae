"""Grouping and pluralisation helpers used when rendering word lists."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Union

KeySelector = Union[str, Callable[[Any], Hashable]]


def _field_getter(name: str) -> Callable[[Any], Hashable]:
    def _get(record: Any) -> Hashable:
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name, None)

    return _get


def _resolve_selector(key: KeySelector) -> Callable[[Any], Hashable]:
    if callable(key):
        return key
    return _field_getter(key)


def _sort_key(group_name: Hashable):
    # ``None`` marks records that lacked the field; it sorts after real keys.
    return (group_name is None, group_name)


def group_by(records: Iterable[Any], key: KeySelector) -> Dict[Hashable, List[Any]]:
    """Group ``records`` into buckets keyed by ``key``.

    ``key`` is either a field name, read from each record (mapping lookup or
    attribute access), or a callable returning the group name for a record.
    Buckets keep the input order of their records and the returned dict
    iterates over group names in ascending order::

        >>> group_by([{"n": 1}, {"n": 2}, {"n": 3}], lambda obj: obj["n"] % 2)
        {0: [{'n': 2}], 1: [{'n': 1}, {'n': 3}]}

    Records missing the field are grouped under ``None``, which comes last.
    Group names must be hashable and mutually comparable. A list or dict
    group name, or a mix of types such as ``int`` and ``str``, raises
    :class:`TypeError`.
    """

    selector = _resolve_selector(key)

    buckets: Dict[Hashable, List[Any]] = {}
    for record in records:
        group_name = selector(record)
        try:
            bucket = buckets.setdefault(group_name, [])
        except TypeError as exc:
            raise TypeError(
                f"group name {group_name!r} is not hashable; "
                "select a str, number or tuple instead"
            ) from exc
        bucket.append(record)

    return {name: buckets[name] for name in sorted(buckets, key=_sort_key)}


def pluralize(count: int) -> str:
    """Return ``""`` for a count of exactly one and ``"s"`` otherwise."""

    return "" if count == 1 else "s"


__all__ = ["KeySelector", "group_by", "pluralize"]
