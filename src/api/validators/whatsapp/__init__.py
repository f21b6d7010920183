"""Limites da Cloud API checados antes do build.

ValidationError é a mesma classe de app/protocols.
"""

from api.validators.whatsapp.interactive import validate_buttons, validate_list_sections
from api.validators.whatsapp.limits import (
    MAX_BUTTON_TITLE_LENGTH,
    MAX_BUTTONS_PER_MESSAGE,
    MAX_LIST_ROW_DESCRIPTION_LENGTH,
    MAX_LIST_ROW_TITLE_LENGTH,
)
from api.validators.whatsapp.validator_dispatcher import WhatsAppMessageValidator
from app.protocols.errors import ValidationError

__all__ = [
    "MAX_BUTTONS_PER_MESSAGE",
    "MAX_BUTTON_TITLE_LENGTH",
    "MAX_LIST_ROW_DESCRIPTION_LENGTH",
    "MAX_LIST_ROW_TITLE_LENGTH",
    "ValidationError",
    "WhatsAppMessageValidator",
    "validate_buttons",
    "validate_list_sections",
]
