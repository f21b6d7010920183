"""Testes para api.payload_builders.whatsapp.

Cobre: base (normalização do destinatário), builders de button, list
e flow, e a factory build_full_payload.
"""

from __future__ import annotations

from typing import Any

import pytest

from api.payload_builders.whatsapp.base import build_base_payload, normalize_recipient
from api.payload_builders.whatsapp.factory import BUILDERS, build_full_payload, builder_for
from api.payload_builders.whatsapp.interactive import (
    ButtonPayloadBuilder,
    FlowPayloadBuilder,
    ListPayloadBuilder,
    _build_flow_action,
)
from app.constants.whatsapp import InteractiveType
from app.protocols.errors import ValidationError
from app.protocols.models import (
    FlowLaunch,
    InteractiveMessageSpec,
    ListMenu,
    ListRow,
    ListSection,
    ReplyButton,
)


def _button_spec(**overrides: Any) -> InteractiveMessageSpec:
    defaults: dict[str, Any] = {
        "to": "+33 1 23 45 67 89",
        "kind": InteractiveType.BUTTON,
        "body": "Confirm?",
        "buttons": (ReplyButton("y", "Yes"), ReplyButton("n", "No")),
    }
    defaults.update(overrides)
    return InteractiveMessageSpec(**defaults)


def _list_spec(sections: tuple[ListSection, ...], **overrides: Any) -> InteractiveMessageSpec:
    return InteractiveMessageSpec(
        to="33123456789",
        kind=InteractiveType.LIST,
        body="Pick one",
        list_menu=ListMenu(button_label="Options", sections=sections),
        **overrides,
    )


class TestBase:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("+33 1 23 45 67 89", "33123456789"),
            ("(555) 010-9999", "5550109999"),
            ("33123456789", "33123456789"),
            ("no digits", ""),
            ("", ""),
        ],
    )
    def test_normalize_recipient(self, raw: str, expected: str) -> None:
        assert normalize_recipient(raw) == expected

    def test_base_payload(self) -> None:
        assert build_base_payload(_button_spec()) == {
            "messaging_product": "whatsapp",
            "to": "33123456789",
            "type": "interactive",
        }


class TestButtonBuilder:
    def test_full_payload(self) -> None:
        payload = build_full_payload(_button_spec())

        assert payload == {
            "messaging_product": "whatsapp",
            "to": "33123456789",
            "type": "interactive",
            "interactive": {
                "type": "button",
                "body": {"text": "Confirm?"},
                "action": {
                    "buttons": [
                        {"type": "reply", "reply": {"id": "y", "title": "Yes"}},
                        {"type": "reply", "reply": {"id": "n", "title": "No"}},
                    ]
                },
            },
        }

    def test_header_and_footer_only_when_non_empty(self) -> None:
        with_both = build_full_payload(_button_spec(header="Hi", footer="Bye"))["interactive"]
        assert with_both["header"] == {"type": "text", "text": "Hi"}
        assert with_both["footer"] == {"text": "Bye"}

        empty = build_full_payload(_button_spec(header="", footer=""))["interactive"]
        assert "header" not in empty
        assert "footer" not in empty

    def test_title_truncated_to_20(self) -> None:
        spec = _button_spec(buttons=(ReplyButton("long", "A" * 25),))
        reply = ButtonPayloadBuilder().build(spec)["interactive"]["action"]["buttons"][0]["reply"]
        assert reply["title"] == "A" * 20

    def test_zero_buttons_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one button required"):
            build_full_payload(_button_spec(buttons=()))

    def test_four_buttons_rejected(self) -> None:
        buttons = tuple(ReplyButton(str(i), f"B{i}") for i in range(4))
        with pytest.raises(ValidationError, match="max 3 buttons"):
            build_full_payload(_button_spec(buttons=buttons))

    def test_three_buttons_accepted(self) -> None:
        buttons = tuple(ReplyButton(str(i), f"B{i}") for i in range(3))
        payload = build_full_payload(_button_spec(buttons=buttons))
        assert len(payload["interactive"]["action"]["buttons"]) == 3


class TestListBuilder:
    def test_rows_truncated_and_optional_fields(self) -> None:
        sections = (
            ListSection(
                title="Main",
                rows=(
                    ListRow("r1", "T" * 30, "D" * 80),
                    ListRow("r2", "Short"),
                ),
            ),
            ListSection(rows=(ListRow("r3", "Other", ""),)),
        )

        action = ListPayloadBuilder().build(_list_spec(sections))["interactive"]["action"]

        assert action["button"] == "Options"
        first, second = action["sections"]
        assert first["title"] == "Main"
        assert first["rows"][0] == {"id": "r1", "title": "T" * 24, "description": "D" * 72}
        assert first["rows"][1] == {"id": "r2", "title": "Short"}
        assert "title" not in second
        assert second["rows"] == [{"id": "r3", "title": "Other"}]

    def test_section_title_not_truncated(self) -> None:
        section = ListSection(title="S" * 40, rows=(ListRow("r", "Row"),))
        action = build_full_payload(_list_spec((section,)))["interactive"]["action"]
        assert action["sections"][0]["title"] == "S" * 40

    def test_empty_sections_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one section with rows required"):
            build_full_payload(_list_spec(()))

    def test_section_without_rows_passes_through(self) -> None:
        action = build_full_payload(_list_spec((ListSection(rows=()),)))["interactive"]["action"]
        assert action["sections"] == [{"rows": []}]


class TestFlowBuilder:
    def test_flow_action(self) -> None:
        flow = FlowLaunch("123", "abc", "Open", {"k": 1})
        assert _build_flow_action(flow) == {
            "name": "flow",
            "parameters": {
                "flow_message_version": "3",
                "flow_id": "123",
                "flow_token": "abc",
                "flow_cta": "Open",
                "flow_action": "navigate",
                "flow_action_payload": {"screen": "WELCOME", "data": {"k": 1}},
            },
        }

    def test_full_payload_with_defaults(self) -> None:
        spec = InteractiveMessageSpec(
            to="+33 1 23",
            kind=InteractiveType.FLOW,
            body="Fill the form",
            footer="Thanks",
            flow=FlowLaunch("123", "abc", "Start"),
        )

        payload = build_full_payload(spec)

        assert payload["to"] == "33123"
        interactive = payload["interactive"]
        assert interactive["type"] == "flow"
        assert interactive["footer"] == {"text": "Thanks"}
        assert interactive["action"]["parameters"]["flow_action_payload"]["data"] == {}

    def test_missing_flow_rejected(self) -> None:
        spec = InteractiveMessageSpec(to="1", kind=InteractiveType.FLOW, body="b")
        with pytest.raises(ValidationError, match="flow parameters are required"):
            FlowPayloadBuilder().build(spec)


class TestFactory:
    def test_builders_registered(self) -> None:
        assert isinstance(builder_for(InteractiveType.BUTTON), ButtonPayloadBuilder)
        assert isinstance(builder_for("list"), ListPayloadBuilder)
        assert isinstance(builder_for(InteractiveType.FLOW), FlowPayloadBuilder)
        assert set(BUILDERS) == set(InteractiveType)

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            BUILDERS[InteractiveType.BUTTON] = ListPayloadBuilder()  # type: ignore[index]

    def test_unsupported_kind_rejected(self) -> None:
        spec = _button_spec(kind="carousel")
        with pytest.raises(ValidationError, match="unsupported interactive type"):
            build_full_payload(spec)

    def test_deterministic_output(self) -> None:
        assert build_full_payload(_button_spec()) == build_full_payload(_button_spec())
