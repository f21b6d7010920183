"""Testes do correlation_id em ContextVar."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import (
    correlation_id_from_headers,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset() -> None:
    token = set_correlation_id("req-1")
    try:
        assert get_correlation_id() == "req-1"
    finally:
        reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_without_value_generates_hex_id() -> None:
    token = set_correlation_id(None)
    try:
        generated = get_correlation_id()
        assert len(generated) == 32
        int(generated, 16)
    finally:
        reset_correlation_id(token)


def test_generate_is_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


def test_scope_restores_previous_value() -> None:
    with correlation_scope("outer") as outer:
        with correlation_scope("inner") as inner:
            assert inner == get_correlation_id() == "inner"
        assert outer == get_correlation_id() == "outer"
    assert get_correlation_id() == ""


def test_scope_generates_when_missing() -> None:
    with correlation_scope() as correlation_id:
        assert correlation_id
        assert get_correlation_id() == correlation_id


@pytest.mark.parametrize(
    ("headers", "expected"),
    [
        ({"x-correlation-id": "abc"}, "abc"),
        ({"x-request-id": "req-9"}, "req-9"),
        ({"x-correlation-id": "  ", "x-request-id": "req-9"}, "req-9"),
        ({"x-correlation-id": "abc", "x-request-id": "req-9"}, "abc"),
        ({}, None),
    ],
)
def test_correlation_id_from_headers(headers: dict[str, str], expected: str | None) -> None:
    assert correlation_id_from_headers(headers) == expected


@pytest.mark.asyncio
async def test_isolated_between_tasks() -> None:
    async def worker(value: str) -> str:
        with correlation_scope(value):
            await asyncio.sleep(0)
            return get_correlation_id()

    assert await asyncio.gather(worker("a"), worker("b")) == ["a", "b"]
