"""Tests for subprocess output streaming."""

import pytest

from assetpush.utils.stream_process import OutputMiddleware, run_command


class CollectingMiddleware(OutputMiddleware[str]):
    def __init__(self) -> None:
        self.seen: list[tuple[str, str]] = []

    def process(self, line: str, stream_type: str) -> str:
        self.seen.append((stream_type, line))
        return line.upper()


def test_streams_both_outputs_through_middleware(tmp_path):
    middleware = CollectingMiddleware()

    return_code, stdout, stderr = run_command(
        ["sh", "-c", "echo restored; echo warning >&2; exit 3"],
        middleware,
        cwd=tmp_path,
    )

    assert return_code == 3
    assert stdout == ["RESTORED"]
    assert stderr == ["WARNING"]
    assert ("stdout", "restored") in middleware.seen
    assert ("stderr", "warning") in middleware.seen


def test_string_command_is_split(tmp_path):
    return_code, stdout, _stderr = run_command(
        "sh -c 'pwd'", CollectingMiddleware(), cwd=tmp_path
    )

    assert return_code == 0
    assert stdout[0].lower().endswith(tmp_path.name.lower())


def test_missing_executable_raises():
    with pytest.raises(FileNotFoundError):
        run_command(["definitely-not-a-real-build-tool"], CollectingMiddleware())
