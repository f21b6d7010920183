"""Testes dos parâmetros dos nodes (formato camelCase do host)."""

from __future__ import annotations

import pytest

from app.constants.whatsapp import DataSource, InteractiveType
from app.domain.node_parameters import (
    ButtonMessageParameters,
    FlowAnalyzeParameters,
    FlowSendParameters,
    parse_flow_data,
    parse_parameters,
)
from app.protocols.errors import ValidationError
from app.protocols.models import FieldExtractionSpec


class TestButtonMessageParameters:
    def test_button_spec(self) -> None:
        params = parse_parameters(
            ButtonMessageParameters,
            {
                "to": "+33 1 23 45 67 89",
                "bodyText": "Confirm?",
                "headerText": "",
                "footerText": "Footer",
                "buttons": {"button": [{"id": "y", "title": "Yes"}, {"id": "n", "title": "No"}]},
            },
        )

        spec = params.to_message_spec()

        assert spec.kind == InteractiveType.BUTTON
        assert spec.to == "+33 1 23 45 67 89"
        assert spec.header is None
        assert spec.footer == "Footer"
        assert [b.id for b in spec.buttons] == ["y", "n"]
        assert spec.list_menu is None

    def test_list_spec_with_defaults(self) -> None:
        params = parse_parameters(
            ButtonMessageParameters,
            {
                "to": "1",
                "messageType": "list",
                "bodyText": "Pick",
                "listOptions": {
                    "section": [
                        {
                            "title": "Main",
                            "rows": {"row": [{"id": "r1", "title": "One", "description": ""}]},
                        }
                    ]
                },
            },
        )

        spec = params.to_message_spec()

        assert spec.kind == InteractiveType.LIST
        assert spec.list_menu is not None
        assert spec.list_menu.button_label == "Choose an option"
        section = spec.list_menu.sections[0]
        assert section.title == "Main"
        assert section.rows[0].description is None

    def test_missing_collections_yield_empty(self) -> None:
        spec = parse_parameters(ButtonMessageParameters, {"to": "1"}).to_message_spec()
        assert spec.buttons == ()

    def test_missing_recipient_rejected(self) -> None:
        with pytest.raises(ValidationError, match="invalid parameters: to"):
            parse_parameters(ButtonMessageParameters, {"bodyText": "x"})

    def test_unknown_message_type_rejected(self) -> None:
        with pytest.raises(ValidationError, match="messageType"):
            parse_parameters(ButtonMessageParameters, {"to": "1", "messageType": "carousel"})


class TestFlowSendParameters:
    def test_flow_spec(self) -> None:
        params = parse_parameters(
            FlowSendParameters,
            {
                "to": "1",
                "flowId": "123",
                "flowToken": "abc",
                "bodyText": "Fill",
                "flowData": '{"name": "Ana"}',
            },
        )

        spec = params.to_message_spec()

        assert spec.kind == InteractiveType.FLOW
        assert spec.flow is not None
        assert spec.flow.cta_text == "Start"
        assert spec.flow.initial_data == {"name": "Ana"}

    def test_invalid_flow_data(self) -> None:
        params = parse_parameters(FlowSendParameters, {"to": "1", "flowData": "{bad"})
        with pytest.raises(ValidationError, match="invalid flow data"):
            params.to_message_spec()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, {}), ("{}", {}), ({"a": 1}, {"a": 1}), ("[1]", [1])],
    )
    def test_parse_flow_data(self, raw: object, expected: object) -> None:
        assert parse_flow_data(raw) == expected

    def test_empty_string_flow_data_is_invalid(self) -> None:
        with pytest.raises(ValidationError, match="invalid flow data"):
            parse_flow_data("")


class TestFlowAnalyzeParameters:
    def test_defaults(self) -> None:
        params = parse_parameters(FlowAnalyzeParameters, {})
        assert params.data_source == DataSource.WEBHOOK
        assert params.to_field_specs() == []

    def test_field_specs(self) -> None:
        params = parse_parameters(
            FlowAnalyzeParameters,
            {
                "extractFields": {
                    "fields": [
                        {"fieldName": "age", "jsonPath": "flowData.age", "dataType": "number"},
                        {"fieldName": "name", "jsonPath": "flowData.name"},
                    ]
                }
            },
        )

        assert params.to_field_specs() == [
            FieldExtractionSpec("age", "flowData.age", "number"),
            FieldExtractionSpec("name", "flowData.name", "string"),
        ]

    def test_load_json_data(self) -> None:
        params = parse_parameters(
            FlowAnalyzeParameters,
            {"dataSource": "json", "jsonData": '{"entry": []}'},
        )
        assert params.load_json_data() == {"entry": []}

    def test_invalid_json_data(self) -> None:
        params = parse_parameters(FlowAnalyzeParameters, {"dataSource": "json", "jsonData": "{"})
        with pytest.raises(ValidationError, match="invalid JSON data"):
            params.load_json_data()
