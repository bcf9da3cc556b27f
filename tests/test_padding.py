"""Tests for version_realign.padding."""

from __future__ import annotations

import pytest

from version_realign.padding import pad_serial, resolve_padding, serial_token


class TestSerialToken:
    @pytest.mark.parametrize(
        ("version", "expected"),
        [
            ("1.2.0.GA-foo-001", "001"),
            ("1.0.0.Final.rebuild-01912-01", "01"),
            ("1.2.0.foo_2", "2"),
            ("1.2.0.3", "3"),
            ("1.2.0.GA-foo", None),
            ("Beta1", None),
        ],
    )
    def test_trailing_token(self, version: str, expected: str | None) -> None:
        assert serial_token(version) == expected


class TestResolvePadding:
    def test_explicit_width_wins(self) -> None:
        assert resolve_padding(5, ["1.2.0.foo-1"]) == 5

    def test_width_from_leading_zeros(self) -> None:
        assert resolve_padding(0, ["1.2.0.GA-foo-001", "1.2.0.GA-foo-002"]) == 3

    def test_widest_token_wins(self) -> None:
        assert resolve_padding(0, ["1.2.0.foo-01", "1.2.0.foo-0003", "1.2.0.foo-7"]) == 4

    def test_unpadded_history(self) -> None:
        assert resolve_padding(0, ["1.2.0.foo-9", "1.2.0.foo-10"]) == 2

    def test_no_tokens(self) -> None:
        assert resolve_padding(0, []) == 1
        assert resolve_padding(0, ["1.2.0.GA-foo"]) == 1


class TestPadSerial:
    @pytest.mark.parametrize(
        ("serial", "width", "expected"),
        [
            (1, 3, "001"),
            (1, 1, "1"),
            (10, 1, "10"),
            (12, 2, "12"),
            (123, 2, "123"),
            (7, 5, "00007"),
        ],
    )
    def test_padding(self, serial: int, width: int, expected: str) -> None:
        assert pad_serial(serial, width) == expected
