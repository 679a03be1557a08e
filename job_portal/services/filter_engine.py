# filter_engine.py
"""Field predicates for the filter resources.

Each entity declares, per filterable field, which comparison applies:

- ``TextContains``: case-insensitive substring of a string field.
- ``ListMember``: case-insensitive *equality* against any element of a list of
  strings (``skills=react`` matches ``["React"]`` but not ``["React Native"]``).
- ``NestedTextContains``: substring against one attribute of any entry of a
  list of objects (profile ``company``/``role`` look inside ``experience``).
- ``NumberEquals``: the query parsed as a number equals the field.

A record whose field is absent never satisfies that field's predicate. Query
keys the entity does not declare are ignored. All predicates must hold;
results keep collection order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union
from urllib.parse import parse_qsl


@dataclass(frozen=True)
class TextContains:
    field: str

    def matches(self, record: Mapping[str, Any], query: str) -> bool:
        value = record.get(self.field)
        if not isinstance(value, str):
            return False
        return query.casefold() in value.casefold()


@dataclass(frozen=True)
class ListMember:
    field: str

    def matches(self, record: Mapping[str, Any], query: str) -> bool:
        values = record.get(self.field)
        if not isinstance(values, list):
            return False
        needle = query.casefold()
        return any(isinstance(item, str) and item.casefold() == needle for item in values)


@dataclass(frozen=True)
class NestedTextContains:
    field: str
    attribute: str

    def matches(self, record: Mapping[str, Any], query: str) -> bool:
        entries = record.get(self.field)
        if not isinstance(entries, list):
            return False
        needle = query.casefold()
        for entry in entries:
            if not isinstance(entry, Mapping):
                continue
            value = entry.get(self.attribute)
            if isinstance(value, str) and needle in value.casefold():
                return True
        return False


@dataclass(frozen=True)
class NumberEquals:
    field: str

    def matches(self, record: Mapping[str, Any], query: str) -> bool:
        value = record.get(self.field)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        try:
            target = float(query)
        except ValueError:
            return False
        return float(value) == target


FieldMatcher = Union[TextContains, ListMember, NestedTextContains, NumberEquals]


PROFILE_FILTERS: dict[str, FieldMatcher] = {
    "name": TextContains("name"),
    "email": TextContains("email"),
    "phone": TextContains("phone"),
    "skills": ListMember("skills"),
    "company": NestedTextContains("experience", "company"),
    "role": NestedTextContains("experience", "role"),
}

JOB_FILTERS: dict[str, FieldMatcher] = {
    "title": TextContains("title"),
    "company": TextContains("company"),
    "location": TextContains("location"),
    "experience": TextContains("experience"),
    "salary": NumberEquals("salary"),
    "description": TextContains("description"),
    "skillsRequired": ListMember("skillsRequired"),
}


def parse_predicates(query: str) -> dict[str, str]:
    """Query string to predicate map. A repeated key keeps its last value."""
    return dict(parse_qsl(query or "", keep_blank_values=True))


def filter_records(
    records: Iterable[Mapping[str, Any]],
    predicates: Mapping[str, str],
    matchers: Mapping[str, FieldMatcher],
) -> list[Any]:
    active = [(matchers[key], value) for key, value in predicates.items() if key in matchers]
    return [record for record in records if all(m.matches(record, value) for m, value in active)]
