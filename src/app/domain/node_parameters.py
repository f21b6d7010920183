"""Parâmetros dos nodes, no formato entregue pelo host (camelCase).

Cada modelo converte os campos do usuário para os contratos de
app/protocols/models. Erros de conversão viram ValidationError.
"""

from __future__ import annotations

import json
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from app.constants.whatsapp import DataSource, FieldDataType, InteractiveType
from app.protocols.errors import ValidationError
from app.protocols.models import (
    FieldExtractionSpec,
    FlowLaunch,
    InteractiveMessageSpec,
    ListMenu,
    ListRow,
    ListSection,
    ReplyButton,
)

DEFAULT_LIST_BUTTON_TEXT = "Choose an option"
DEFAULT_FLOW_BUTTON_TEXT = "Start"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class _NodeParameters(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ButtonParameter(_NodeParameters):
    id: str = ""
    title: str = ""


class ButtonCollection(_NodeParameters):
    button: list[ButtonParameter] = Field(default_factory=list)


class RowParameter(_NodeParameters):
    id: str = ""
    title: str = ""
    description: str = ""


class RowCollection(_NodeParameters):
    row: list[RowParameter] = Field(default_factory=list)


class SectionParameter(_NodeParameters):
    title: str = ""
    rows: RowCollection = Field(default_factory=RowCollection)


class SectionCollection(_NodeParameters):
    section: list[SectionParameter] = Field(default_factory=list)


class _MessageParameters(_NodeParameters):
    to: str = Field(..., description="Telefone do destinatário (formato internacional).")
    header_text: str = Field(default="", alias="headerText")
    body_text: str = Field(default="", alias="bodyText")
    footer_text: str = Field(default="", alias="footerText")


class ButtonMessageParameters(_MessageParameters):
    """Parâmetros do node whatsAppButtonMessage."""

    message_type: Literal["button", "list"] = Field(default="button", alias="messageType")
    buttons: ButtonCollection = Field(default_factory=ButtonCollection)
    list_button_text: str = Field(default=DEFAULT_LIST_BUTTON_TEXT, alias="listButtonText")
    list_options: SectionCollection = Field(default_factory=SectionCollection, alias="listOptions")

    def to_message_spec(self) -> InteractiveMessageSpec:
        kind = InteractiveType(self.message_type)
        common: dict[str, Any] = {
            "to": self.to,
            "kind": kind,
            "body": self.body_text,
            "header": self.header_text or None,
            "footer": self.footer_text or None,
        }
        if kind == InteractiveType.BUTTON:
            buttons = tuple(ReplyButton(id=b.id, title=b.title) for b in self.buttons.button)
            return InteractiveMessageSpec(**common, buttons=buttons)

        sections = tuple(
            ListSection(
                title=section.title or None,
                rows=tuple(
                    ListRow(id=row.id, title=row.title, description=row.description or None)
                    for row in section.rows.row
                ),
            )
            for section in self.list_options.section
        )
        return InteractiveMessageSpec(
            **common,
            list_menu=ListMenu(button_label=self.list_button_text, sections=sections),
        )


def parse_flow_data(raw: Any) -> Any:
    """Converte o campo flowData (string JSON ou valor já decodificado).

    Raises:
        ValidationError: Se a string não for JSON válido
    """
    if raw is None:
        return {}
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationError("invalid flow data") from exc


class FlowSendParameters(_MessageParameters):
    """Parâmetros do node whatsAppFlowSend."""

    flow_id: str = Field(default="", alias="flowId")
    flow_token: str = Field(default="", alias="flowToken")
    button_text: str = Field(default=DEFAULT_FLOW_BUTTON_TEXT, alias="buttonText")
    flow_data: Any = Field(default="{}", alias="flowData")

    def to_message_spec(self) -> InteractiveMessageSpec:
        return InteractiveMessageSpec(
            to=self.to,
            kind=InteractiveType.FLOW,
            body=self.body_text,
            header=self.header_text or None,
            footer=self.footer_text or None,
            flow=FlowLaunch(
                flow_id=self.flow_id,
                flow_token=self.flow_token,
                cta_text=self.button_text,
                initial_data=parse_flow_data(self.flow_data),
            ),
        )


class FieldParameter(_NodeParameters):
    field_name: str = Field(default="", alias="fieldName")
    json_path: str = Field(default="", alias="jsonPath")
    data_type: str = Field(default=FieldDataType.STRING.value, alias="dataType")


class FieldCollection(_NodeParameters):
    fields: list[FieldParameter] = Field(default_factory=list)


class FlowAnalyzeParameters(_NodeParameters):
    """Parâmetros do node whatsAppFlowAnalyze."""

    data_source: DataSource = Field(default=DataSource.WEBHOOK, alias="dataSource")
    json_data: Any = Field(default="{}", alias="jsonData")
    extract_fields: FieldCollection = Field(default_factory=FieldCollection, alias="extractFields")

    def to_field_specs(self) -> list[FieldExtractionSpec]:
        return [
            FieldExtractionSpec(
                field_name=f.field_name,
                json_path=f.json_path,
                target_type=f.data_type,
            )
            for f in self.extract_fields.fields
        ]

    def load_json_data(self) -> Any:
        """Decodifica jsonData quando a origem é `json`.

        Raises:
            ValidationError: Se a string não for JSON válido
        """
        if not isinstance(self.json_data, str):
            return self.json_data
        try:
            return json.loads(self.json_data)
        except ValueError as exc:
            raise ValidationError("invalid JSON data") from exc


def parse_parameters(model: type[_ModelT], raw: dict[str, Any]) -> _ModelT:
    """Valida parâmetros brutos do host no modelo informado.

    Raises:
        ValidationError: Se campos obrigatórios faltarem ou tiverem tipo inválido
    """
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ValidationError(f"invalid parameters: {problems}") from exc


__all__ = [
    "ButtonMessageParameters",
    "FlowAnalyzeParameters",
    "FlowSendParameters",
    "parse_flow_data",
    "parse_parameters",
]
