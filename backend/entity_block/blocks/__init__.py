"""
Entity browser block: selection encoding, the selection list controller and
the collaborators it renders with.
"""
from .selection import (
    BlockConfiguration,
    SelectionEntry,
    make_composite_id,
    parse_selection_list,
    serialize_selection_list,
    split_composite_id,
)
from .recursion import RecursionGuard, RenderContext
from .protocols import EntityLookup, ViewRenderer
from .controller import SelectionListController, split_entity_ids
from .lookup import SqlEntityLookup, ENTITY_TYPES, VIEW_MODES
from .renderer import EntityViewRenderer

__all__ = [
    "BlockConfiguration",
    "SelectionEntry",
    "make_composite_id",
    "parse_selection_list",
    "serialize_selection_list",
    "split_composite_id",
    "RecursionGuard",
    "RenderContext",
    "EntityLookup",
    "ViewRenderer",
    "SelectionListController",
    "split_entity_ids",
    "SqlEntityLookup",
    "ENTITY_TYPES",
    "VIEW_MODES",
    "EntityViewRenderer",
]
