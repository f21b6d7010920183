"""Dispatcher de validação por variante interativa."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.whatsapp.interactive import validate_buttons, validate_list_sections
from app.constants.whatsapp import InteractiveType
from app.protocols.errors import ValidationError

if TYPE_CHECKING:
    from app.protocols.models import InteractiveMessageSpec


class WhatsAppMessageValidator:
    """Valida InteractiveMessageSpec antes do build.

    Verifica o que é responsabilidade do chamador (body obrigatório,
    variante preenchida) e reaplica as regras estruturais do builder.
    """

    def validate_message_spec(self, spec: InteractiveMessageSpec) -> None:
        """Valida a requisição de envio.

        Raises:
            ValidationError: Se alguma restrição for violada
        """
        if not spec.body:
            raise ValidationError("body text is required")

        if spec.kind == InteractiveType.BUTTON:
            validate_buttons(spec.buttons)
        elif spec.kind == InteractiveType.LIST:
            if spec.list_menu is None:
                raise ValidationError("at least one section with rows required")
            validate_list_sections(spec.list_menu.sections)
        elif spec.kind == InteractiveType.FLOW:
            if spec.flow is None:
                raise ValidationError("flow parameters are required for flow messages")
        else:
            raise ValidationError(f"unsupported interactive type: {spec.kind}")
