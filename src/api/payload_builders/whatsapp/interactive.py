"""Builders para mensagens interativas (button, list, flow).

Truncamento de títulos/descrições é silencioso e acontece antes da
serialização. Saída é função pura da entrada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.whatsapp.interactive import validate_buttons, validate_list_sections
from api.validators.whatsapp.limits import (
    MAX_BUTTON_TITLE_LENGTH,
    MAX_LIST_ROW_DESCRIPTION_LENGTH,
    MAX_LIST_ROW_TITLE_LENGTH,
)
from app.constants.whatsapp import (
    FLOW_INITIAL_SCREEN,
    FLOW_MESSAGE_VERSION,
    FLOW_NAVIGATE_ACTION,
    InteractiveType,
)
from app.protocols.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import (
        FlowLaunch,
        InteractiveMessageSpec,
        ListMenu,
        ListRow,
        ListSection,
        ReplyButton,
    )


def _truncate(text: str | None, limit: int) -> str:
    return (text or "")[:limit]


def _build_interactive_object(
    spec: InteractiveMessageSpec,
    interactive_type: InteractiveType,
    action: dict[str, Any],
) -> dict[str, Any]:
    """Monta header/body/footer comuns; header e footer só se não vazios."""
    interactive: dict[str, Any] = {"type": interactive_type.value}

    if spec.header:
        interactive["header"] = {"type": "text", "text": spec.header}

    interactive["body"] = {"text": spec.body}

    if spec.footer:
        interactive["footer"] = {"text": spec.footer}

    interactive["action"] = action
    return {"interactive": interactive}


def _build_button_action(buttons: Sequence[ReplyButton]) -> dict[str, Any]:
    """Action para botões de reply (títulos limitados a 20 caracteres)."""
    return {
        "buttons": [
            {
                "type": "reply",
                "reply": {
                    "id": button.id,
                    "title": _truncate(button.title, MAX_BUTTON_TITLE_LENGTH),
                },
            }
            for button in buttons
        ]
    }


def _build_list_row(row: ListRow) -> dict[str, Any]:
    row_data: dict[str, Any] = {
        "id": row.id,
        "title": _truncate(row.title, MAX_LIST_ROW_TITLE_LENGTH),
    }
    if row.description:
        row_data["description"] = _truncate(row.description, MAX_LIST_ROW_DESCRIPTION_LENGTH)
    return row_data


def _build_list_section(section: ListSection) -> dict[str, Any]:
    section_data: dict[str, Any] = {}
    if section.title:
        section_data["title"] = section.title
    section_data["rows"] = [_build_list_row(row) for row in section.rows]
    return section_data


def _build_list_action(list_menu: ListMenu) -> dict[str, Any]:
    """Action para lista com seções."""
    return {
        "button": list_menu.button_label,
        "sections": [_build_list_section(section) for section in list_menu.sections],
    }


def _build_flow_action(flow: FlowLaunch) -> dict[str, Any]:
    """Action para WhatsApp Flow (navegação para a tela inicial)."""
    return {
        "name": "flow",
        "parameters": {
            "flow_message_version": FLOW_MESSAGE_VERSION,
            "flow_id": flow.flow_id,
            "flow_token": flow.flow_token,
            "flow_cta": flow.cta_text,
            "flow_action": FLOW_NAVIGATE_ACTION,
            "flow_action_payload": {
                "screen": FLOW_INITIAL_SCREEN,
                "data": flow.initial_data,
            },
        },
    }


class ButtonPayloadBuilder:
    """Builder para botões de resposta rápida (1 a 3)."""

    def build(self, spec: InteractiveMessageSpec) -> dict[str, Any]:
        """Constrói bloco interactive do tipo button.

        Raises:
            ValidationError: Se 0 botões ou mais de 3
        """
        validate_buttons(spec.buttons)
        return _build_interactive_object(
            spec, InteractiveType.BUTTON, _build_button_action(spec.buttons)
        )


class ListPayloadBuilder:
    """Builder para lista interativa."""

    def build(self, spec: InteractiveMessageSpec) -> dict[str, Any]:
        """Constrói bloco interactive do tipo list.

        Raises:
            ValidationError: Se nenhuma seção for informada
        """
        sections = spec.list_menu.sections if spec.list_menu else ()
        validate_list_sections(sections)
        return _build_interactive_object(
            spec, InteractiveType.LIST, _build_list_action(spec.list_menu)
        )


class FlowPayloadBuilder:
    """Builder para lançamento de WhatsApp Flow."""

    def build(self, spec: InteractiveMessageSpec) -> dict[str, Any]:
        """Constrói bloco interactive do tipo flow.

        Raises:
            ValidationError: Se os parâmetros do Flow estiverem ausentes
        """
        if spec.flow is None:
            raise ValidationError("flow parameters are required for flow messages")
        return _build_interactive_object(spec, InteractiveType.FLOW, _build_flow_action(spec.flow))
