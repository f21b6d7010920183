"""Use case para análise de respostas de WhatsApp Flows."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import FieldExtractionSpec
    from app.protocols.ports import FlowResponseExtractorProtocol

logger = logging.getLogger(__name__)


class AnalyzeFlowResponseUseCase:
    """Extrai a resposta de Flow e os campos configurados de um envelope."""

    def __init__(self, extractor: FlowResponseExtractorProtocol) -> None:
        self._extractor = extractor

    def execute(
        self,
        envelope: Any,
        fields: Sequence[FieldExtractionSpec] = (),
    ) -> dict[str, Any]:
        """Monta a saída do node.

        Returns:
            Resultado da extração, `extractedFields` e `originalData`
            (o envelope recebido, sem alteração)
        """
        result = self._extractor.extract(envelope)
        extracted = self._extractor.extract_fields(result, fields) if fields else {}

        logger.debug(
            "flow_response_analyzed",
            extra={
                "success": result.success,
                "field_count": len(extracted),
                "has_error": result.error is not None,
            },
        )
        return {
            **result.to_dict(),
            "extractedFields": extracted,
            "originalData": envelope,
        }
