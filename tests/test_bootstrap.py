# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import build_task_source, create_initial_state, run_initial_load
from tasklist.connectors.console_connector import ConsolePrompt, run_console_loop
from tasklist.tasks.task_loader import HttpTaskSource, StaticTaskSource

from .fakes import FakeNotifier, FakePrompt, FakeTaskSource


def test_create_initial_state_wires_ports(settings: SimpleNamespace) -> None:
    notifier, prompt = FakeNotifier(), FakePrompt()

    state = create_initial_state(settings=settings, notifier=notifier, prompt=prompt)

    assert settings.data_dir.is_dir()
    assert state.notifier is notifier
    assert state.prompt is prompt
    assert state.view.page_size == settings.page_size
    assert state.dialog is not None
    assert len(state.store) == 0


def test_build_task_source(settings: SimpleNamespace) -> None:
    assert isinstance(build_task_source(settings), StaticTaskSource)

    online = SimpleNamespace(**{**vars(settings), "source_enabled": True, "load_retries": 2})
    source = build_task_source(online)
    assert isinstance(source, HttpTaskSource)
    assert source.url == settings.source_url
    assert source.retries == 2


@pytest.mark.asyncio
async def test_run_initial_load(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings, notifier=FakeNotifier(), prompt=FakePrompt())

    n = await run_initial_load(state, FakeTaskSource([{"id": 1, "title": "a"}]))

    assert n == 1
    assert state.store.get(1).title == "a"


def test_console_prompt_answers() -> None:
    assert ConsolePrompt(lambda _: "y").confirm("?") is True
    assert ConsolePrompt(lambda _: "").confirm("?") is False

    def eof(_: str) -> str:
        raise EOFError

    assert ConsolePrompt(eof).confirm("?") is False


def test_console_loop_runs_commands_until_exit(state, capsys) -> None:
    lines = iter(['/add title="a" description="b"', "hello", "/list", "/exit"])

    run_console_loop(state, input_fn=lambda _: next(lines))

    out = capsys.readouterr().out
    assert "Added task 1." in out
    assert "Commands start with '/'" in out
    assert len(state.store) == 1


def test_console_loop_stops_on_eof(state) -> None:
    def eof(_: str) -> str:
        raise EOFError

    run_console_loop(state, input_fn=eof)
