"""Confirmation summary shown before an ebook is sent to the selected clients."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from jinja2 import BaseLoader, Environment
from markupsafe import Markup

from ebook_sender import config as app_config
from ebook_sender.services.pluralization import format_plural
from ebook_sender.services.selection import SelectionModel

MESSAGE_TEMPLATE = "Você selecionou {count} {noun}. Confirma o envio?"

_JINJA_ENV = Environment(loader=BaseLoader(), autoescape=True, trim_blocks=True, lstrip_blocks=True)
_SUMMARY_HTML = _JINJA_ENV.from_string(
    "<p>Você selecionou <b>{{ summary.count }}</b> {{ noun }}. Confirma o envio?</p>"
    '<ul class="list-group">'
    "{% for item in summary.items %}"
    '<li class="list-group-item"><b>{{ item.name }}</b> - <i>{{ item.email }}</i></li>'
    "{% endfor %}"
    "</ul>"
)


@dataclass(frozen=True)
class SummaryItem:
    name: str
    email: str


@dataclass(frozen=True)
class SummaryContent:
    count: int
    message: str
    noun: str
    items: Tuple[SummaryItem, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "message": self.message,
            "items": [{"name": i.name, "email": i.email} for i in self.items],
        }


def build(model: SelectionModel, *, noun_forms: Optional[Tuple[str, str]] = None) -> SummaryContent:
    """Summarize the live selection; never cached between calls."""
    singular, plural = noun_forms or app_config.recipient_noun_forms()
    selected = model.selected_recipients()
    count = len(selected)
    noun = format_plural(singular, plural, count)
    return SummaryContent(
        count=count,
        message=MESSAGE_TEMPLATE.format(count=count, noun=noun),
        noun=noun,
        items=tuple(SummaryItem(name=r.name, email=r.email) for r in selected),
    )


def render_html(summary: SummaryContent) -> Markup:
    """Confirmation dialog body; client names and emails are escaped."""
    return Markup(_SUMMARY_HTML.render(summary=summary, noun=summary.noun))


__all__ = ["SummaryItem", "SummaryContent", "MESSAGE_TEMPLATE", "build", "render_html"]
