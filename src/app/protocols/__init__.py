"""Contratos do core: modelos canônicos, portas e erros."""

from .errors import ValidationError
from .models import (
    FieldExtractionSpec,
    FlowExtractionResult,
    FlowLaunch,
    InteractiveMessageSpec,
    ListMenu,
    ListRow,
    ListSection,
    NodeItem,
    ReplyButton,
)
from .ports import (
    CredentialTesterProtocol,
    FlowResponseExtractorProtocol,
    MessageSpecValidatorProtocol,
    OutboundSenderProtocol,
    PayloadBuilderProtocol,
    WhatsAppHttpClientProtocol,
)

__all__ = [
    "CredentialTesterProtocol",
    "FieldExtractionSpec",
    "FlowExtractionResult",
    "FlowLaunch",
    "FlowResponseExtractorProtocol",
    "InteractiveMessageSpec",
    "ListMenu",
    "ListRow",
    "ListSection",
    "MessageSpecValidatorProtocol",
    "NodeItem",
    "OutboundSenderProtocol",
    "PayloadBuilderProtocol",
    "ReplyButton",
    "ValidationError",
    "WhatsAppHttpClientProtocol",
]
