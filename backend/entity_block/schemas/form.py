"""
Configuration form tree and posted form state for the entity browser block.

The server builds a SelectionForm; the client posts back a FormState holding
what the editor has changed so far.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

REMOVE_BUTTON_PREFIX = "remove_"
ORDER_GROUP = "entity-browser-block-delta-order"
BROWSER_UPDATED_EVENT = "entity_browser_value_updated"


class AjaxBinding(BaseModel):
    """Partial update binding: which container gets replaced on which event"""
    wrapper: str
    event: Optional[str] = None


class ViewModeOption(BaseModel):
    key: str
    label: str


class ViewModeSelect(BaseModel):
    options: List[ViewModeOption]
    default_value: Optional[str] = None


class RemoveButton(BaseModel):
    name: str
    value: str = "Remove"
    op: Literal["remove"] = "remove"
    ajax: AjaxBinding


class WeightElement(BaseModel):
    title: str
    delta: int
    default_value: int
    css_class: str = ORDER_GROUP


class TableRow(BaseModel):
    id: str
    title: str
    view_mode: ViewModeSelect
    remove: RemoveButton
    weight: WeightElement
    draggable: bool = True


class TableDrag(BaseModel):
    action: str = "order"
    relationship: str = "sibling"
    group: str = ORDER_GROUP


class SelectionTable(BaseModel):
    header: List[str] = ["Title", "View mode", "Operations", "Order"]
    empty: str = "No entities yet"
    tabledrag: TableDrag = Field(default_factory=TableDrag)
    rows: List[TableRow] = []

    def row_ids(self) -> List[str]:
        return [row.id for row in self.rows]


class EntityBrowserElement(BaseModel):
    browser_id: str
    # Whitespace separated composite ids picked but not yet saved
    entity_ids: str = ""
    ajax: AjaxBinding


class SelectionForm(BaseModel):
    """The selection container; also the subtree returned by partial updates"""
    wrapper_id: str
    first_load: bool = False
    entity_browser: EntityBrowserElement
    table: SelectionTable


class TableRowValue(BaseModel):
    view_mode: Optional[str] = None
    weight: int = 0


class EntityBrowserValue(BaseModel):
    entity_ids: str = ""


class SelectionValues(BaseModel):
    entity_browser: EntityBrowserValue = Field(default_factory=EntityBrowserValue)
    # Keyed by composite id, in row order
    table: Dict[str, TableRowValue] = {}


class FormState(BaseModel):
    first_load: bool = True
    values: SelectionValues = Field(default_factory=SelectionValues)


class TriggeringElement(BaseModel):
    op: Literal["add", "remove"]
    name: Optional[str] = None


class PostedFormState(FormState):
    """Form state echoed back by a rebuilt form"""
    first_load: bool = False


class PartialUpdateRequest(BaseModel):
    form_state: PostedFormState
    trigger: TriggeringElement
