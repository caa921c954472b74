import pytest

from entity_block.blocks.controller import SelectionListController, split_entity_ids
from entity_block.blocks.recursion import RecursionGuard, RenderContext
from entity_block.blocks.selection import BlockConfiguration, SelectionEntry
from entity_block.exceptions import MalformedSelectionError, ValidationError
from entity_block.schemas.form import (
    FormState,
    SelectionValues,
    TableRowValue,
    TriggeringElement,
    EntityBrowserValue,
)
from entity_block.schemas.render import RenderedFragment


class FakeEntity:
    def __init__(self, entity_type, entity_id, title, viewable=True):
        self.entity_type = entity_type
        self.id = entity_id
        self.title = title
        self.viewable = viewable


class FakeLookup:
    """In-memory EntityLookup"""

    def __init__(self, *entities):
        self.entities = {(e.entity_type, str(e.id)): e for e in entities}

    def load(self, entity_type, entity_id):
        return self.entities.get((entity_type, entity_id))

    def can_view(self, entity):
        return entity.viewable

    def view_mode_options(self, entity_type):
        return [("default", "Default"), ("teaser", "Teaser")]

    def label(self, entity):
        return entity.title


class FakeRenderer:
    """ViewRenderer that records calls and can run a hook per entity"""

    def __init__(self):
        self.calls = []
        self.hooks = {}

    def render(self, entity, view_mode, context):
        key = f"{entity.entity_type}:{entity.id}"
        self.calls.append(key)
        nested = self.hooks[key](context) if key in self.hooks else []
        return RenderedFragment(
            entity_type=entity.entity_type,
            entity_id=str(entity.id),
            view_mode=view_mode,
            label=entity.title,
            markup=f"<{key}>" + "".join(f.markup for f in nested) + f"</{key}>",
        )


@pytest.fixture
def entities():
    return [
        FakeEntity("node", "A", "Alpha"),
        FakeEntity("node", "B", "Beta"),
        FakeEntity("node", "C", "Gamma"),
        FakeEntity("node", "P", "Private", viewable=False),
    ]


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def controller(entities, renderer):
    return SelectionListController(FakeLookup(*entities), renderer)


def config_of(*values):
    return BlockConfiguration.from_dict({"entities": list(values)})


def rebuild_state(table=None, picked=""):
    return FormState(
        first_load=False,
        values=SelectionValues(
            table=table or {},
            entity_browser=EntityBrowserValue(entity_ids=picked),
        ),
    )


# ----------------------------------------------------------------------
# build_form
# ----------------------------------------------------------------------

def test_first_load_seeds_rows_from_configuration(controller):
    form = controller.build_form(config_of("node:B:teaser", "node:A:default"), "media")

    assert form.table.row_ids() == ["node:B", "node:A"]
    assert form.first_load is False
    assert form.entity_browser.browser_id == "media"
    assert form.entity_browser.ajax.event == "entity_browser_value_updated"

    first = form.table.rows[0]
    assert first.title == "Beta"
    assert first.view_mode.default_value == "teaser"
    assert [o.key for o in first.view_mode.options] == ["default", "teaser"]
    assert first.remove.name == "remove_node:B"
    assert first.remove.ajax.wrapper == "entity-browser-block-form"
    assert first.weight.default_value == 0
    assert first.weight.delta == 2
    assert form.table.rows[1].weight.default_value == 1


def test_empty_configuration_builds_empty_table(controller):
    form = controller.build_form(BlockConfiguration(), "media")
    assert form.table.rows == []
    assert form.table.empty == "No entities yet"
    assert form.table.header == ["Title", "View mode", "Operations", "Order"]


def test_rebuild_uses_session_rows_not_configuration(controller):
    state = rebuild_state(table={"node:C": TableRowValue(view_mode="teaser", weight=0)})
    form = controller.build_form(config_of("node:A:default"), "media", state)

    assert form.table.row_ids() == ["node:C"]
    assert form.table.rows[0].view_mode.default_value == "teaser"


def test_picked_entities_are_appended_once(controller):
    state = rebuild_state(
        table={"node:A": TableRowValue(view_mode="default", weight=0)},
        picked="node:A node:B  node:B\nnode:C",
    )
    form = controller.build_form(BlockConfiguration(), "media", state)

    assert form.table.row_ids() == ["node:A", "node:B", "node:C"]
    assert form.table.rows[1].view_mode.default_value == "default"


def test_stored_view_mode_used_when_session_has_none(controller):
    state = rebuild_state(table={"node:A": TableRowValue(weight=0)})
    form = controller.build_form(config_of("node:A:teaser"), "media", state)
    assert form.table.rows[0].view_mode.default_value == "teaser"


def test_missing_entities_are_left_out_of_the_table(controller):
    form = controller.build_form(config_of("node:A:default", "node:GONE:default"), "media")
    assert form.table.row_ids() == ["node:A"]


def test_duplicate_stored_entries_share_one_row(controller):
    form = controller.build_form(config_of("node:A:default", "node:B:default", "node:A:teaser"), "media")

    assert form.table.row_ids() == ["node:A", "node:B"]
    assert [row.weight.delta for row in form.table.rows] == [2, 2]
    assert form.table.rows[0].view_mode.default_value == "default"

    updated = controller.handle_partial_update(TriggeringElement(op="remove", name="remove_node:A"), form)
    assert updated.table.row_ids() == ["node:B"]


def test_malformed_picked_id_is_rejected(controller):
    with pytest.raises(MalformedSelectionError):
        controller.build_form(BlockConfiguration(), "media", rebuild_state(picked="node"))


# ----------------------------------------------------------------------
# handle_partial_update
# ----------------------------------------------------------------------

def test_remove_drops_row_and_pending_picker_value(controller):
    state = rebuild_state(
        table={"node:A": TableRowValue(weight=0), "node:B": TableRowValue(weight=1)},
        picked="node:B node:C",
    )
    form = controller.build_form(BlockConfiguration(), "media", state)
    assert form.table.row_ids() == ["node:A", "node:B", "node:C"]

    updated = controller.handle_partial_update(TriggeringElement(op="remove", name="remove_node:B"), form)

    assert updated.table.row_ids() == ["node:A", "node:C"]
    assert split_entity_ids(updated.entity_browser.entity_ids) == ["node:C"]
    # The input form is left untouched
    assert form.table.row_ids() == ["node:A", "node:B", "node:C"]


def test_remove_of_row_not_in_picker_value(controller):
    form = controller.build_form(config_of("node:A:default", "node:B:default"), "media")
    updated = controller.handle_partial_update(TriggeringElement(op="remove", name="remove_node:A"), form)
    assert updated.table.row_ids() == ["node:B"]
    assert updated.entity_browser.entity_ids == ""


def test_add_returns_container_unchanged(controller):
    form = controller.build_form(BlockConfiguration(), "media", rebuild_state(picked="node:A"))
    updated = controller.handle_partial_update(TriggeringElement(op="add"), form)
    assert updated == form


def test_remove_without_button_name_is_rejected(controller):
    form = controller.build_form(BlockConfiguration(), "media")
    with pytest.raises(ValidationError):
        controller.handle_partial_update(TriggeringElement(op="remove", name="delete_node:A"), form)


# ----------------------------------------------------------------------
# submit
# ----------------------------------------------------------------------

def test_submit_orders_rows_by_weight(controller):
    state = rebuild_state(table={
        "node:A": TableRowValue(view_mode="default", weight=3),
        "node:B": TableRowValue(view_mode="teaser", weight=1),
        "node:C": TableRowValue(view_mode="default", weight=2),
    })
    config = controller.submit(state)
    assert config.to_dict() == {"entities": ["node:B:teaser", "node:C:default", "node:A:default"]}


def test_submit_keeps_posted_order_for_equal_weights(controller):
    state = rebuild_state(table={
        "node:C": TableRowValue(view_mode="default", weight=0),
        "node:A": TableRowValue(view_mode="default", weight=0),
        "node:B": TableRowValue(view_mode="default", weight=-1),
    })
    assert [e.entity_id for e in controller.submit(state).entities] == ["B", "C", "A"]


def test_submit_defaults_missing_view_mode_to_first_option(controller):
    state = rebuild_state(table={"node:A": TableRowValue(weight=0)})
    assert controller.submit(state).entities == (SelectionEntry("node", "A", "default"),)


def test_submit_rejects_unknown_view_mode(controller):
    state = rebuild_state(table={"node:A": TableRowValue(view_mode="poster", weight=0)})
    with pytest.raises(ValidationError):
        controller.submit(state)


def test_submit_empty_table(controller):
    assert controller.submit(rebuild_state()).entities == ()


# ----------------------------------------------------------------------
# render
# ----------------------------------------------------------------------

def test_render_skips_missing_and_hidden_entities(controller, renderer):
    config = config_of("node:MISSING:default", "node:P:default", "node:B:default", "node:C:teaser")
    fragments = controller.render(config)

    assert [f.entity_id for f in fragments] == ["B", "C"]
    assert fragments[1].view_mode == "teaser"
    assert renderer.calls == ["node:B", "node:C"]


def test_render_empty_configuration(controller):
    assert controller.render(BlockConfiguration()) == []


def test_render_keeps_duplicates_in_order(controller):
    fragments = controller.render(config_of("node:A:default", "node:B:default", "node:A:default"))
    assert [f.entity_id for f in fragments] == ["A", "B", "A"]


def test_render_stops_when_entity_reenters_itself(controller, renderer):
    config = config_of("node:A:default", "node:B:default")
    nested_results = []

    def embed_same_block(context):
        fragments = controller.render(config, context)
        nested_results.append([f.entity_id for f in fragments])
        return fragments

    renderer.hooks["node:A"] = embed_same_block
    fragments = controller.render(config)

    # Third entry of node:A aborts the innermost pass before node:B
    assert nested_results[0] == []
    assert nested_results[1] == ["A", "B"]
    assert [f.entity_id for f in fragments] == ["A", "B"]
    assert renderer.calls == ["node:A", "node:A", "node:B", "node:B"]


def test_render_abort_discards_remaining_entries(controller):
    guard = RecursionGuard(limit=2)
    context = RenderContext(guard)
    guard.enter("node:B:default")
    guard.enter("node:B:default")

    fragments = controller.render(config_of("node:A:default", "node:B:default", "node:C:default"), context)
    assert [f.entity_id for f in fragments] == ["A"]


def test_separate_contexts_do_not_share_counts(controller):
    config = config_of("node:A:default", "node:A:default", "node:A:default")
    assert len(controller.render(config)) == 2
    assert len(controller.render(config)) == 2


def test_shared_context_accumulates_counts(controller):
    context = controller.new_context()
    config = config_of("node:A:default")
    assert len(controller.render(config, context)) == 1
    assert len(controller.render(config, context)) == 1
    assert controller.render(config, context) == []
