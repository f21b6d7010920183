"""Conversão de valores extraídos para o tipo configurado no campo.

Regras permissivas:
- None sempre vira None (independente do tipo alvo)
- number inválido vira NaN (chamador trata como inválido)
- tipo alvo desconhecido devolve o valor sem alteração
"""

from __future__ import annotations

import json
import math
from collections.abc import Callable, Mapping
from typing import Any

from app.constants.whatsapp import FieldDataType

NAN = float("nan")


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _to_number(value: Any) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return NAN

    text = value.strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return NAN


def _to_boolean(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (str, int, float)):
        return bool(value)
    # Containers vazios contam como verdadeiros
    return True


def _to_array(value: Any) -> list[Any]:
    return value if isinstance(value, list) else [value]


def _to_object(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {"value": value}


_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    FieldDataType.STRING: _to_string,
    FieldDataType.NUMBER: _to_number,
    FieldDataType.BOOLEAN: _to_boolean,
    FieldDataType.ARRAY: _to_array,
    FieldDataType.OBJECT: _to_object,
}


def coerce_value(value: Any, target_type: str) -> Any:
    """Converte `value` para `target_type`.

    Args:
        value: Valor bruto extraído (pode ser None)
        target_type: string | number | boolean | array | object

    Returns:
        Valor convertido, None para entrada None, ou o próprio valor
        quando o tipo alvo é desconhecido
    """
    if value is None:
        return None

    converter = _CONVERTERS.get(target_type)
    if converter is None:
        return value
    return converter(value)


def is_invalid_number(value: Any) -> bool:
    """True se `value` é o marcador NaN produzido por conversão numérica."""
    return isinstance(value, float) and math.isnan(value)
