"""Limites estruturais da API Meta para mensagens interativas."""

from typing import Final

MAX_BUTTONS_PER_MESSAGE: Final[int] = 3
MAX_BUTTON_TITLE_LENGTH: Final[int] = 20
MAX_LIST_ROW_TITLE_LENGTH: Final[int] = 24
MAX_LIST_ROW_DESCRIPTION_LENGTH: Final[int] = 72
