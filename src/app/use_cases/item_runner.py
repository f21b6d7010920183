"""Execução de nodes item a item, com política de falha configurável.

- continue_on_fail=False: a primeira falha aborta o lote (exceção propaga)
- continue_on_fail=True: a falha vira item de saída com success=False;
  `error` é a mensagem da exceção, ou o corpo de erro do provedor para
  nodes que pedem provider_body_errors
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

logger = logging.getLogger(__name__)

_ItemT = TypeVar("_ItemT")


def failure_output(exc: Exception, *, provider_body: bool = False) -> dict[str, Any]:
    """Item de saída para falha capturada.

    Com provider_body=True usa o corpo de erro do provedor (`details`)
    quando existir.
    """
    details = getattr(exc, "details", None) if provider_body else None
    return {"success": False, "error": details or str(exc)}


async def run_items(
    items: Sequence[_ItemT],
    handler: Callable[[_ItemT], Awaitable[dict[str, Any]]],
    *,
    continue_on_fail: bool,
    node_name: str,
    provider_body_errors: bool = False,
) -> list[dict[str, Any]]:
    """Processa itens em ordem, um resultado por item.

    Raises:
        Exception: A falha original do item, quando continue_on_fail=False
    """
    results: list[dict[str, Any]] = []
    for index, item in enumerate(items):
        try:
            results.append(await handler(item))
        except Exception as exc:
            if not continue_on_fail:
                logger.warning(
                    "node_batch_aborted",
                    extra={
                        "node": node_name,
                        "item_index": index,
                        "error_type": type(exc).__name__,
                    },
                )
                raise
            logger.warning(
                "node_item_failed",
                extra={
                    "node": node_name,
                    "item_index": index,
                    "error_type": type(exc).__name__,
                },
            )
            results.append(failure_output(exc, provider_body=provider_body_errors))
    return results
