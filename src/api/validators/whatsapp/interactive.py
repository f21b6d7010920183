"""Validadores estruturais para mensagens interativas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.whatsapp.limits import MAX_BUTTONS_PER_MESSAGE
from app.protocols.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import ListSection, ReplyButton


def validate_buttons(buttons: Sequence[ReplyButton] | None) -> None:
    """Valida quantidade de botões de resposta rápida.

    Títulos longos não são erro: o builder trunca silenciosamente.

    Raises:
        ValidationError: Se nenhum botão ou mais que o máximo permitido
    """
    if not buttons:
        raise ValidationError("at least one button required")

    if len(buttons) > MAX_BUTTONS_PER_MESSAGE:
        raise ValidationError(f"max {MAX_BUTTONS_PER_MESSAGE} buttons")


def validate_list_sections(sections: Sequence[ListSection] | None) -> None:
    """Valida que a lista possui ao menos uma seção.

    Raises:
        ValidationError: Se a sequência de seções estiver vazia
    """
    if not sections:
        raise ValidationError("at least one section with rows required")
