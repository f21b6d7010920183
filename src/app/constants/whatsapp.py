"""Enums de domínio para mensagens interativas e extração de Flows WhatsApp."""

from __future__ import annotations

from enum import StrEnum


class MessageType(StrEnum):
    """Tipos de conteúdo enviados pela API Meta/WhatsApp."""

    INTERACTIVE = "interactive"


class InteractiveType(StrEnum):
    """Variantes de mensagem interativa suportadas."""

    BUTTON = "button"
    LIST = "list"
    FLOW = "flow"


class FieldDataType(StrEnum):
    """Tipos alvo para conversão de campos extraídos."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class DataSource(StrEnum):
    """Origem do payload analisado pelo node de Flow."""

    WEBHOOK = "webhook"
    JSON = "json"


# Marcador fixo de versão do protocolo de Flows
FLOW_MESSAGE_VERSION = "3"

# Tela inicial e ação de navegação usadas ao lançar um Flow
FLOW_INITIAL_SCREEN = "WELCOME"
FLOW_NAVIGATE_ACTION = "navigate"
