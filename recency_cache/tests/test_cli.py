"""Tests for the command-line demo."""

import argparse
import logging

import pytest

from ..domain.entities.cache import RecencyCache
from ..interfaces.cli.main import (
    Operation,
    create_parser,
    demo_operations,
    main,
    parse_operation,
    run,
)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestParseOperation:
    """Test operation parsing."""

    def test_write(self):
        assert parse_operation("1=beta") == Operation(1, "beta")

    def test_read(self):
        op = parse_operation("6")
        assert op == Operation(6)
        assert not op.is_write

    def test_value_may_contain_equals(self):
        assert parse_operation("2=a=b") == Operation(2, "a=b")

    def test_empty_value_is_write(self):
        op = parse_operation("3=")
        assert op.is_write
        assert op.value == ""

    def test_negative_key(self):
        assert parse_operation("-4=x") == Operation(-4, "x")

    @pytest.mark.parametrize("text", ["abc", "x=1", "", "=value"])
    def test_invalid_key(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_operation(text)


class TestRun:
    """Test replaying operations."""

    def test_demo_operations(self):
        results = run(RecencyCache(2), demo_operations())
        assert results == ["0", "alpha", "0", "gamma"]

    def test_reads_only(self):
        assert run(RecencyCache(1), [Operation(1), Operation(2)]) == ["0", "0"]


class TestMain:
    """Test the CLI entry point."""

    def test_default_demo_output(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "The size of this LRU Cache is : 2",
            "0",
            "alpha",
            "0",
            "gamma",
        ]

    def test_custom_operations(self, capsys):
        assert main(["-c", "1", "1=only", "1", "2=replaces", "1", "2"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "The size of this LRU Cache is : 1",
            "only",
            "0",
            "replaces",
        ]

    def test_invalid_capacity_fails(self, capsys):
        assert main(["-c", "0"]) == 1
        assert capsys.readouterr().out == ""

    def test_clamp_policy_runs_unbounded(self, capsys):
        assert main(["-c", "0", "--policy", "clamp", "1=a", "2=b", "3=c", "1"]) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "The size of this LRU Cache is : 0",
            "a",
        ]
        assert "must be more than 0" in captured.err

    def test_malformed_operation_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["key=value"])
        assert exc_info.value.code == 2

    def test_log_file(self, tmp_path, capsys):
        log_file = tmp_path / "cache.log"
        assert main(["-v", "--log-file", str(log_file), "-c", "1", "1=a", "2=b"]) == 0
        assert "Evicted key 1" in log_file.read_text(encoding="utf-8")

    def test_parser_defaults(self):
        parsed = create_parser().parse_args([])
        assert parsed.capacity == 2
        assert parsed.policy == "strict"
        assert parsed.operations == []
        assert parsed.verbose is False
