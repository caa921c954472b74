"""
Selection List Controller

Owns the ordered list of selected entities of one entity browser block and
implements its three host entry points:

- build_form: editing table seeded from configuration or in-session edits
- handle_partial_update: add/remove partial updates of the selection container
- submit: normalize posted table rows into a new configuration

plus render, which turns a stored configuration into rendered fragments.
"""
from typing import Any, List, Optional, Tuple
import logging

from ..exceptions import MalformedSelectionError, ValidationError
from ..schemas.form import (
    AjaxBinding,
    BROWSER_UPDATED_EVENT,
    EntityBrowserElement,
    FormState,
    REMOVE_BUTTON_PREFIX,
    RemoveButton,
    SelectionForm,
    SelectionTable,
    TableRow,
    TriggeringElement,
    ViewModeOption,
    ViewModeSelect,
    WeightElement,
)
from ..schemas.render import RenderedFragment
from .protocols import EntityLookup, ViewRenderer
from .recursion import DEFAULT_RECURSIVE_RENDER_LIMIT, RecursionGuard, RenderContext
from .selection import (
    BlockConfiguration,
    SelectionEntry,
    split_composite_id,
)

logger = logging.getLogger(__name__)

DEFAULT_WRAPPER_ID = "entity-browser-block-form"


def split_entity_ids(value: str) -> List[str]:
    """Split the browser's pending value into composite ids, dropping repeats"""
    seen = []
    for item in (value or "").split():
        if item not in seen:
            seen.append(item)
    return seen


class SelectionListController:
    """Form, partial update, submit and render logic of an entity browser block"""

    def __init__(
        self,
        lookup: EntityLookup,
        renderer: ViewRenderer,
        recursive_render_limit: int = DEFAULT_RECURSIVE_RENDER_LIMIT,
        wrapper_id: str = DEFAULT_WRAPPER_ID,
    ):
        self.lookup = lookup
        self.renderer = renderer
        self.recursive_render_limit = recursive_render_limit
        self.wrapper_id = wrapper_id

    # ------------------------------------------------------------------
    # Configuration form
    # ------------------------------------------------------------------

    def build_form(
        self,
        config: BlockConfiguration,
        browser_id: str,
        form_state: Optional[FormState] = None,
    ) -> SelectionForm:
        """
        Build the selection container of the block configuration form

        On first load the table is seeded from the stored configuration;
        afterwards it is rebuilt from the rows posted back in ``form_state``.
        Entities picked in the browser are appended when not already listed.

        Args:
            config: Stored block configuration
            browser_id: Entity browser the picker element opens
            form_state: Posted form state, None for a fresh form

        Returns:
            The selection container; nothing is persisted
        """
        form_state = form_state or FormState()
        values = form_state.values

        if form_state.first_load:
            row_ids = list(dict.fromkeys(entry.composite_id for entry in config.entities))
        else:
            row_ids = list(values.table.keys())

        for picked_id in split_entity_ids(values.entity_browser.entity_ids):
            if picked_id not in row_ids:
                row_ids.append(picked_id)

        entities = self._load_rows(row_ids)
        stored_view_modes = config.view_mode_map()

        rows = []
        for delta, (composite_id, entity) in enumerate(entities):
            posted = values.table.get(composite_id)
            options = self._view_mode_options(composite_id)
            default_view_mode = self._pick_view_mode(
                options,
                posted.view_mode if posted else None,
                stored_view_modes.get(composite_id),
            )
            rows.append(TableRow(
                id=composite_id,
                title=self.lookup.label(entity),
                view_mode=ViewModeSelect(
                    options=[ViewModeOption(key=key, label=label) for key, label in options],
                    default_value=default_view_mode,
                ),
                remove=RemoveButton(
                    name=f"{REMOVE_BUTTON_PREFIX}{composite_id}",
                    ajax=AjaxBinding(wrapper=self.wrapper_id),
                ),
                weight=WeightElement(
                    title=f"Weight for row {delta + 1}",
                    delta=len(entities),
                    default_value=delta,
                ),
            ))

        return SelectionForm(
            wrapper_id=self.wrapper_id,
            first_load=False,
            entity_browser=EntityBrowserElement(
                browser_id=browser_id,
                entity_ids=values.entity_browser.entity_ids,
                ajax=AjaxBinding(wrapper=self.wrapper_id, event=BROWSER_UPDATED_EVENT),
            ),
            table=SelectionTable(rows=rows),
        )

    def _load_rows(self, row_ids: List[str]) -> List[Tuple[str, Any]]:
        loaded = []
        for composite_id in row_ids:
            entity_type, entity_id = split_composite_id(composite_id)
            entity = self.lookup.load(entity_type, entity_id)
            if entity is None:
                logger.warning(f"Dropping selection row for missing entity: {composite_id}")
                continue
            loaded.append((composite_id, entity))
        return loaded

    def _view_mode_options(self, composite_id: str) -> List[Tuple[str, str]]:
        entity_type, _ = split_composite_id(composite_id)
        return list(self.lookup.view_mode_options(entity_type))

    @staticmethod
    def _pick_view_mode(options, *candidates) -> Optional[str]:
        keys = [key for key, _ in options]
        for candidate in candidates:
            if candidate in keys:
                return candidate
        return keys[0] if keys else None

    # ------------------------------------------------------------------
    # Partial updates
    # ------------------------------------------------------------------

    def handle_partial_update(self, trigger: TriggeringElement, form: SelectionForm) -> SelectionForm:
        """
        Apply a partial update to a built selection container

        ``remove`` drops the row named by the button and strips the same id
        from the browser's pending value. ``add`` returns the container as is.

        Returns:
            The selection container to re-render in place of the wrapper
        """
        if trigger.op != "remove":
            return form

        if not trigger.name or not trigger.name.startswith(REMOVE_BUTTON_PREFIX):
            raise ValidationError(f"Invalid remove trigger: {trigger.name!r}")
        composite_id = trigger.name[len(REMOVE_BUTTON_PREFIX):]
        logger.debug(f"Removing selection row {composite_id}")

        rows = [row for row in form.table.rows if row.id != composite_id]
        pending = [
            item for item in split_entity_ids(form.entity_browser.entity_ids)
            if item != composite_id
        ]
        return form.model_copy(update={
            "table": form.table.model_copy(update={"rows": rows}),
            "entity_browser": form.entity_browser.model_copy(update={"entity_ids": " ".join(pending)}),
        })

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def submit(self, form_state: FormState) -> BlockConfiguration:
        """
        Turn posted table rows into a new configuration

        Rows are ordered by ascending weight; ``sorted`` is stable, so equal
        weights keep their posted order.

        Raises:
            MalformedSelectionError: for a row key that is not a composite id
            ValidationError: when a row has no usable view mode
        """
        rows = list(form_state.values.table.items())
        ordered = sorted(rows, key=lambda item: item[1].weight)

        entries = []
        for composite_id, row in ordered:
            entity_type, _ = split_composite_id(composite_id)
            options = [key for key, _ in self.lookup.view_mode_options(entity_type)]
            view_mode = row.view_mode or (options[0] if options else None)
            if not view_mode:
                raise MalformedSelectionError(composite_id, "no view mode selected")
            if options and view_mode not in options:
                raise ValidationError(f"Unknown view mode '{view_mode}' for {entity_type}")
            entries.append(SelectionEntry.from_composite_id(composite_id, view_mode))

        logger.debug(f"Normalized {len(entries)} selection rows")
        return BlockConfiguration(tuple(entries))

    # ------------------------------------------------------------------
    # Render
    # ------------------------------------------------------------------

    def new_context(self, viewer: Any = None) -> RenderContext:
        return RenderContext(RecursionGuard(self.recursive_render_limit), viewer=viewer)

    def render(
        self,
        config: BlockConfiguration,
        context: Optional[RenderContext] = None,
    ) -> List[RenderedFragment]:
        """
        Render the configured entities in order

        Missing and non-viewable entities are skipped. If an entry is entered
        more often than the guard allows, the pass stops and the fragments
        rendered so far are returned.
        """
        context = context if context is not None else self.new_context()
        build: List[RenderedFragment] = []

        for entry in config.entities:
            entity = self.lookup.load(entry.entity_type, entry.entity_id)
            if entity is None:
                logger.debug(f"Skipping missing entity {entry.composite_id}")
                continue
            if not self.lookup.can_view(entity):
                logger.debug(f"Skipping entity without view access {entry.composite_id}")
                continue

            if not context.guard.enter(entry.serialize()):
                logger.warning(
                    f"Recursive rendering of {entry.serialize()} detected, "
                    f"stopping after {len(build)} fragments"
                )
                return build

            build.append(self.renderer.render(entity, entry.view_mode, context))

        return build
