"""Testes do use case de envio de mensagens interativas."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.constants.whatsapp import InteractiveType
from app.protocols.errors import ValidationError
from app.protocols.models import InteractiveMessageSpec, ReplyButton
from app.use_cases.whatsapp.send_interactive_message import (
    SendInteractiveMessageUseCase,
    first_message_id,
)


def _spec() -> InteractiveMessageSpec:
    return InteractiveMessageSpec(
        to="33123456789",
        kind=InteractiveType.BUTTON,
        body="Confirm?",
        buttons=(ReplyButton("y", "Yes"),),
    )


def _use_case(*, validator=None, builder=None, sender=None) -> SendInteractiveMessageUseCase:
    if builder is None:
        builder = MagicMock()
        builder.build_full_payload.return_value = {"to": "33123456789"}
    if sender is None:
        sender = MagicMock()
        sender.send = AsyncMock(return_value={"messages": [{"id": "wamid.1"}]})
    return SendInteractiveMessageUseCase(
        validator=validator or MagicMock(),
        builder=builder,
        sender=sender,
    )


@pytest.mark.asyncio
async def test_execute_validates_builds_and_sends() -> None:
    validator = MagicMock()
    builder = MagicMock()
    builder.build_full_payload.return_value = {"to": "33123456789"}
    sender = MagicMock()
    sender.send = AsyncMock(return_value={"messages": [{"id": "wamid.1"}]})
    spec = _spec()

    response = await _use_case(validator=validator, builder=builder, sender=sender).execute(spec)

    validator.validate_message_spec.assert_called_once_with(spec)
    builder.build_full_payload.assert_called_once_with(spec)
    sender.send.assert_awaited_once_with({"to": "33123456789"})
    assert response == {"messages": [{"id": "wamid.1"}]}


@pytest.mark.asyncio
async def test_validation_error_propagates_without_sending() -> None:
    validator = MagicMock()
    validator.validate_message_spec.side_effect = ValidationError("at least one button required")
    sender = MagicMock()
    sender.send = AsyncMock()

    with pytest.raises(ValidationError):
        await _use_case(validator=validator, sender=sender).execute(_spec())

    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_transport_error_propagates() -> None:
    sender = MagicMock()
    sender.send = AsyncMock(side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError, match="boom"):
        await _use_case(sender=sender).execute(_spec())


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        ({"messages": [{"id": "wamid.1"}]}, "wamid.1"),
        ({"messages": []}, None),
        ({}, None),
        ({"messages": ["x"]}, None),
    ],
)
def test_first_message_id(response: dict, expected: str | None) -> None:
    assert first_message_id(response) == expected
