from typing import Any, Iterable


class Mutation:
    """
    A set of field changes applied to one item in a single atomic update.

    Three kinds of change are supported, mirroring what the store applies
    server-side:
    - add: union values into a set field
    - remove: subtract values from a set field
    - set: overwrite a scalar field

    Builder methods return the mutation so calls can be chained:
        Mutation().add("ids", ["abc"]).set("ttl", 1700000000.0)
    """

    def __init__(self):
        self.additions: dict[str, set] = {}
        self.removals: dict[str, set] = {}
        self.assignments: dict[str, Any] = {}

    def add(self, field: str, values: Iterable[Any]) -> 'Mutation':
        self.additions.setdefault(field, set()).update(values)
        return self

    def remove(self, field: str, values: Iterable[Any]) -> 'Mutation':
        self.removals.setdefault(field, set()).update(values)
        return self

    def set(self, field: str, value: Any) -> 'Mutation':
        self.assignments[field] = value
        return self

    def is_empty(self) -> bool:
        return not (self.additions or self.removals or self.assignments)

    def only_removes(self) -> bool:
        """True when applying this mutation can only shrink an item."""
        return bool(self.removals) and not (self.additions or self.assignments)

    def apply(self, item: dict) -> dict:
        """Apply the changes to an item dict in place and return it."""
        for field, values in self.additions.items():
            item[field] = set(item.get(field) or ()) | values
        for field, values in self.removals.items():
            if field in item:
                item[field] = set(item[field]) - values
        for field, value in self.assignments.items():
            item[field] = value
        return item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mutation):
            return False
        return (self.additions == other.additions and
                self.removals == other.removals and
                self.assignments == other.assignments)

    def __str__(self) -> str:
        parts = []
        parts.extend(f"add {f}={sorted(map(str, v))}" for f, v in self.additions.items())
        parts.extend(f"remove {f}={sorted(map(str, v))}" for f, v in self.removals.items())
        parts.extend(f"set {f}={v!r}" for f, v in self.assignments.items())
        return f"Mutation({'; '.join(parts)})"

    def __repr__(self) -> str:
        return self.__str__()
