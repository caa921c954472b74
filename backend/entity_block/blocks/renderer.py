"""
HTML view renderer for content entities.

Document content may embed other blocks with ``[block:<id>]`` tokens. In the
``default`` and ``full`` view modes those tokens are replaced by the embedded
block's output, rendered with the caller's RenderContext so that recursion is
accounted for across the whole pass.
"""
from html import escape
from typing import Any, Callable, List
import logging
import re

from ..schemas.render import RenderedFragment
from .recursion import RenderContext

logger = logging.getLogger(__name__)

EMBED_PATTERN = re.compile(r"\[block:(\d+)\]")

EmbedBlock = Callable[[int, RenderContext], List[RenderedFragment]]


def _body_text(entity: Any) -> str:
    if hasattr(entity, "content"):
        return entity.content or ""
    return getattr(entity, "description", None) or ""


def _paragraphs(text: str) -> str:
    parts = [part.strip() for part in text.split("\n\n") if part.strip()]
    return "".join(f"<p>{escape(part)}</p>" for part in parts)


class EntityViewRenderer:
    """ViewRenderer producing article markup per view mode"""
    
    def __init__(self, embed_block: EmbedBlock, teaser_length: int = 200):
        self.embed_block = embed_block
        self.teaser_length = teaser_length
    
    def render(self, entity: Any, view_mode: str, context: RenderContext) -> RenderedFragment:
        label = entity.label()
        text = _body_text(entity)
        
        if view_mode == "teaser":
            body = self._teaser(text)
        else:
            body = self._expand(text, context)
        
        markup = (
            f'<article class="entity entity--{entity.entity_type} view-mode--{escape(view_mode)}" '
            f'data-entity-id="{entity.entity_type}:{entity.id}">'
            f"<h2>{escape(label)}</h2>"
            f'<div class="entity__body">{body}</div>'
            f"</article>"
        )
        return RenderedFragment(
            entity_type=entity.entity_type,
            entity_id=str(entity.id),
            view_mode=view_mode,
            label=label,
            markup=markup,
        )
    
    def _teaser(self, text: str) -> str:
        plain = EMBED_PATTERN.sub("", text).strip()
        if len(plain) > self.teaser_length:
            plain = plain[:self.teaser_length].rstrip() + "…"
        return _paragraphs(plain)
    
    def _expand(self, text: str, context: RenderContext) -> str:
        parts = []
        position = 0
        for match in EMBED_PATTERN.finditer(text):
            parts.append(_paragraphs(text[position:match.start()]))
            parts.append(self._embedded_block(int(match.group(1)), context))
            position = match.end()
        parts.append(_paragraphs(text[position:]))
        return "".join(parts)
    
    def _embedded_block(self, block_id: int, context: RenderContext) -> str:
        context.depth += 1
        try:
            fragments = self.embed_block(block_id, context)
        finally:
            context.depth -= 1
        inner = "".join(fragment.markup for fragment in fragments)
        return f'<div class="block block--entity-browser" data-block-id="{block_id}">{inner}</div>'
