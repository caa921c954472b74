"""
Entity reference encoding for block configuration.

A selected entity is stored as the compact string
``entity_type:entity_id:view_mode``. The ``entity_type:entity_id`` prefix is
the composite id, which identifies the entity independently of how it is
displayed.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..exceptions import MalformedSelectionError

SEPARATOR = ":"


def make_composite_id(entity_type: str, entity_id) -> str:
    """Build the ``entity_type:entity_id`` key for an entity."""
    return f"{entity_type}{SEPARATOR}{entity_id}"


def split_composite_id(value: str) -> Tuple[str, str]:
    """Split a composite id into ``(entity_type, entity_id)``."""
    parts = value.split(SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise MalformedSelectionError(value, "expected 'entity_type:entity_id'")
    return parts[0], parts[1]


@dataclass(frozen=True)
class SelectionEntry:
    """One selected entity and the view mode it is displayed in."""
    entity_type: str
    entity_id: str
    view_mode: str

    @property
    def composite_id(self) -> str:
        return make_composite_id(self.entity_type, self.entity_id)

    def serialize(self) -> str:
        return f"{self.composite_id}{SEPARATOR}{self.view_mode}"

    @classmethod
    def parse(cls, value: str) -> "SelectionEntry":
        """
        Parse an ``entity_type:entity_id:view_mode`` string.

        Raises:
            MalformedSelectionError: if the value does not have exactly three
                non-empty fields.
        """
        if not isinstance(value, str):
            raise MalformedSelectionError(repr(value), "expected a string")
        parts = value.split(SEPARATOR)
        if len(parts) != 3:
            raise MalformedSelectionError(value, f"expected 3 fields, got {len(parts)}")
        if not all(parts):
            raise MalformedSelectionError(value, "fields must not be empty")
        return cls(*parts)

    @classmethod
    def from_composite_id(cls, composite_id: str, view_mode: str) -> "SelectionEntry":
        entity_type, entity_id = split_composite_id(composite_id)
        if not view_mode:
            raise MalformedSelectionError(f"{composite_id}{SEPARATOR}", "view mode must not be empty")
        return cls(entity_type, entity_id, view_mode)


def parse_selection_list(values: Iterable[str]) -> List[SelectionEntry]:
    """Parse stored reference strings, keeping their order."""
    return [SelectionEntry.parse(value) for value in values]


def serialize_selection_list(entries: Iterable[SelectionEntry]) -> List[str]:
    """Serialize entries to reference strings, keeping their order."""
    return [entry.serialize() for entry in entries]


@dataclass(frozen=True)
class BlockConfiguration:
    """Typed form of a block's persisted ``{"entities": [...]}`` configuration."""
    entities: Tuple[SelectionEntry, ...] = ()

    @classmethod
    def from_dict(cls, data) -> "BlockConfiguration":
        data = data or {}
        return cls(tuple(parse_selection_list(data.get("entities") or [])))

    def to_dict(self) -> dict:
        return {"entities": serialize_selection_list(self.entities)}

    def view_mode_map(self) -> dict:
        """Map composite id to its stored view mode; the first occurrence wins."""
        view_modes = {}
        for entry in self.entities:
            view_modes.setdefault(entry.composite_id, entry.view_mode)
        return view_modes
