"""Testes do roteamento de interações por tipo."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.domain.interaction import (
    InteractionPayload,
    InteractionResponseType,
    InvalidInteractionKindError,
    ResponseEnvelope,
)
from app.services.command_interaction import CommandInteraction
from app.services.interaction_dispatcher import InteractionDispatcher


def test_ping_returns_pong_synchronously_without_loop() -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=1)

    result = dispatcher.handle({"type": 1, "id": "1", "token": "t"})

    assert result == ResponseEnvelope(InteractionResponseType.PONG)
    assert result.to_dict() == {"type": 1}


def test_ping_does_not_notify_listeners() -> None:
    dispatcher = InteractionDispatcher()
    seen: list[CommandInteraction] = []
    dispatcher.add_listener(seen.append)

    dispatcher.handle({"type": 1, "id": "1", "token": "t"})

    assert seen == []


@pytest.mark.parametrize("kind", [0, 3, 99, None, "2"])
def test_unknown_kind_raises(kind: object) -> None:
    dispatcher = InteractionDispatcher()

    with pytest.raises(InvalidInteractionKindError) as exc_info:
        dispatcher.handle({"type": kind, "id": "1", "token": "t"})

    assert exc_info.value.kind == kind


def test_invalid_budget_is_rejected() -> None:
    with pytest.raises(ValueError, match="deadline_budget_ms"):
        InteractionDispatcher(deadline_budget_ms=0)


@pytest.mark.asyncio
async def test_command_emits_interaction_and_returns_pending_future(
    command_data: dict[str, object],
) -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=250)
    seen: list[CommandInteraction] = []
    dispatcher.add_listener(seen.append)

    result = dispatcher.handle(command_data)

    assert isinstance(result, asyncio.Future)
    assert not result.done()
    assert len(seen) == 1
    interaction = seen[0]
    assert interaction.id == command_data["id"]
    assert interaction.token == "tok-abc"
    assert interaction.command_name == "ping"
    assert interaction.option("text") == "olá"

    interaction.handle.reply("pong")
    envelope = await result
    assert envelope.to_dict() == {"type": 4, "data": {"content": "pong"}}


@pytest.mark.asyncio
async def test_sync_listener_reply_resolves_immediately(
    command_data: dict[str, object],
) -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=250)

    @dispatcher.on_interaction
    def _on_command(interaction: CommandInteraction) -> None:
        interaction.acknowledge(silent=True)

    result = dispatcher.handle(command_data)

    assert isinstance(result, asyncio.Future)
    assert result.done()
    assert result.result().type is InteractionResponseType.ACKNOWLEDGE


@pytest.mark.asyncio
async def test_async_listener_runs_as_tracked_task(command_data: dict[str, object]) -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=250)
    finished = asyncio.Event()

    @dispatcher.on_interaction
    async def _on_command(interaction: CommandInteraction) -> None:
        await asyncio.sleep(0.01)
        interaction.handle.reply({"content": "done"})
        finished.set()

    envelope = await dispatcher.resolve(command_data)

    assert envelope.data == {"content": "done"}
    await asyncio.wait_for(finished.wait(), timeout=1)
    await dispatcher.drain_listener_tasks(timeout_seconds=1)
    assert dispatcher.pending_listener_tasks == 0


@pytest.mark.asyncio
async def test_listener_exception_does_not_break_race(
    command_data: dict[str, object],
    caplog: pytest.LogCaptureFixture,
) -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=20)

    def _broken(_: CommandInteraction) -> None:
        raise RuntimeError("boom")

    dispatcher.add_listener(_broken)

    with caplog.at_level(logging.ERROR):
        envelope = await dispatcher.resolve(command_data)

    assert envelope.type is InteractionResponseType.ACKNOWLEDGE_WITH_SOURCE
    assert "interaction_listener_failed" in caplog.text


@pytest.mark.asyncio
async def test_without_listeners_deadline_still_answers(
    command_data: dict[str, object],
) -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=20)

    envelope = await dispatcher.resolve(command_data)

    assert envelope.to_dict() == {"type": 5}


@pytest.mark.asyncio
async def test_resolve_accepts_parsed_payload(command_data: dict[str, object]) -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=250)
    dispatcher.add_listener(lambda interaction: interaction.handle.reply("ok"))

    envelope = await dispatcher.resolve(InteractionPayload.from_dict(command_data))

    assert envelope.data == {"content": "ok"}


def test_remove_listener_is_idempotent() -> None:
    dispatcher = InteractionDispatcher()
    listener = dispatcher.add_listener(lambda _: None)

    dispatcher.remove_listener(listener)
    dispatcher.remove_listener(listener)


@pytest.mark.asyncio
async def test_drain_cancels_stuck_listener_tasks(command_data: dict[str, object]) -> None:
    dispatcher = InteractionDispatcher(deadline_budget_ms=20)

    @dispatcher.on_interaction
    async def _stuck(_: CommandInteraction) -> None:
        await asyncio.sleep(10)

    await dispatcher.resolve(command_data)
    assert dispatcher.pending_listener_tasks == 1

    await dispatcher.drain_listener_tasks(timeout_seconds=0.01)

    assert dispatcher.pending_listener_tasks == 0
