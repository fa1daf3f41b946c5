"""Tests for the 64-bit Uid."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from auid import DecodingError, Encoding, GeneratorConfig, Uid
from auid.uid import INT64_MAX, INT64_MIN

from .conftest import KNOWN_TIMESTAMP, FixedClock


class TestGeneration:
    def test_timestamp_placement(self, zero_config: GeneratorConfig) -> None:
        """The high 5 bytes carry the timestamp and the low 3 bytes are random."""
        uid = Uid.new(zero_config)

        assert uid.to_bytes() == KNOWN_TIMESTAMP.to_bytes(5, "big") + b"\x00\x00\x00"
        assert uid.to_int() == KNOWN_TIMESTAMP << 24
        assert uid.timestamp == KNOWN_TIMESTAMP
        assert uid.random == 0

    def test_random_fills_only_low_bytes(self, fixed_clock: FixedClock) -> None:
        uid = Uid.new(GeneratorConfig(clock=fixed_clock, entropy=lambda n: b"\xff" * n))

        assert uid.to_hex() == "006553f100ffffff"
        assert uid.timestamp == KNOWN_TIMESTAMP
        assert uid.random == 0xFFFFFF

    def test_created_at(self, zero_config: GeneratorConfig) -> None:
        uid = Uid.new(zero_config)
        assert uid.created_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_default_config_uses_current_time(self) -> None:
        before = int(datetime.now(timezone.utc).timestamp())
        uid = Uid.new()
        after = int(datetime.now(timezone.utc).timestamp())
        assert before <= uid.timestamp <= after

    def test_unique_within_one_second(self, fixed_clock: FixedClock) -> None:
        # ~n**2 / 2**25 collision chance with 24 random bits
        config = GeneratorConfig(clock=fixed_clock)
        uids = {Uid.new(config) for _ in range(100)}
        assert len(uids) == 100

    def test_sorts_by_time_across_seconds(self) -> None:
        earlier = Uid.new(GeneratorConfig(clock=FixedClock(KNOWN_TIMESTAMP), entropy=lambda n: b"\xff" * n))
        later = Uid.new(GeneratorConfig(clock=FixedClock(KNOWN_TIMESTAMP + 1), entropy=lambda n: bytes(n)))

        assert earlier < later
        assert earlier.to_bytes() < later.to_bytes()


class TestConversions:
    @pytest.mark.parametrize("value", [0, 1, -1, INT64_MIN, INT64_MAX, KNOWN_TIMESTAMP << 24])
    def test_int_round_trip(self, value: int) -> None:
        uid = Uid.from_int(value)
        assert int(uid) == value
        assert Uid(uid.to_int()) == uid

    @pytest.mark.parametrize("value", [0, 1, -1, INT64_MIN, INT64_MAX, KNOWN_TIMESTAMP << 24])
    def test_bytes_round_trip(self, value: int) -> None:
        uid = Uid(value)
        assert Uid.from_bytes(bytes(uid)) == uid

    def test_negative_values_are_twos_complement(self) -> None:
        assert Uid(-1).to_bytes() == b"\xff" * 8
        assert Uid(INT64_MIN).to_bytes() == b"\x80" + b"\x00" * 7
        assert Uid.from_bytes(b"\x80" + b"\x00" * 7).to_int() == INT64_MIN

    def test_accepts_bytearray_and_memoryview(self) -> None:
        raw = bytes.fromhex("006553f100000000")
        assert Uid.from_bytes(bytearray(raw)) == Uid.from_bytes(memoryview(raw))

    @pytest.mark.parametrize("value", [8, "00000000", None])
    def test_rejects_non_bytes(self, value) -> None:
        with pytest.raises(TypeError):
            Uid.from_bytes(value)

    @pytest.mark.parametrize("length", [0, 7, 9, 16])
    def test_wrong_length_reports_received_length(self, length: int) -> None:
        with pytest.raises(DecodingError, match=f"expected len to be 8, but was {length}"):
            Uid.try_from(bytes(length))

    @pytest.mark.parametrize("value", [INT64_MAX + 1, INT64_MIN - 1])
    def test_out_of_range_int(self, value: int) -> None:
        with pytest.raises(ValueError):
            Uid(value)

    @pytest.mark.parametrize("value", ["12", 1.5, True, None])
    def test_non_int_value(self, value) -> None:
        with pytest.raises(TypeError):
            Uid(value)


class TestEncodings:
    @pytest.mark.parametrize("encoding", list(Encoding))
    def test_round_trip(self, encoding: Encoding) -> None:
        uid = Uid.new()
        assert Uid.decode(uid.encode(encoding), encoding) == uid

    def test_named_methods_round_trip(self) -> None:
        uid = Uid.new()
        assert Uid.from_base16(uid.to_base16()) == uid
        assert Uid.from_hex(uid.to_hex()) == uid
        assert Uid.from_base32(uid.to_base32()) == uid
        assert Uid.from_unpadded_base32(uid.to_unpadded_base32()) == uid
        assert Uid.from_base58(uid.to_base58()) == uid
        assert Uid.from_base64(uid.to_base64()) == uid
        assert Uid.from_unpadded_base64(uid.to_unpadded_base64()) == uid

    def test_negative_round_trip(self) -> None:
        uid = Uid(INT64_MIN)
        assert uid.to_hex() == "8000000000000000"
        for encoding in Encoding:
            assert Uid.decode(uid.encode(encoding), encoding) == uid

    def test_known_encodings(self, zero_config: GeneratorConfig) -> None:
        uid = Uid.new(zero_config)
        assert uid.to_hex() == "006553f100000000"
        assert uid.to_base32() == "ABSVH4IAAAAAA==="
        assert uid.to_unpadded_base32() == "ABSVH4IAAAAAA"
        assert uid.to_base64() == "AGVT8QAAAAA="
        assert uid.to_unpadded_base64() == "AGVT8QAAAAA"
        assert uid.to_base58().startswith("1")

    def test_hex_is_fixed_width(self) -> None:
        assert Uid(0).to_hex() == "0" * 16
        assert len(Uid.new().to_hex()) == 16

    @pytest.mark.parametrize(
        "encoding, payload",
        [
            (Encoding.BASE16, "00" * 7),
            (Encoding.BASE16, "00" * 9),
            (Encoding.BASE32, "AAAAAAAAAAAAAAAA"),
            (Encoding.BASE32_NOPAD, "AAAAAAAAAAAA"),
            (Encoding.BASE58, "1" * 9),
            (Encoding.BASE64, "AAAAAAAAAAAA"),
            (Encoding.BASE64_NOPAD, "AAAAAAAAAA"),
        ],
    )
    def test_wrong_decoded_length(self, encoding: Encoding, payload: str) -> None:
        with pytest.raises(DecodingError, match="expected len to be 8"):
            Uid.decode(payload, encoding)

    @pytest.mark.parametrize(
        "encoding, payload",
        [
            (Encoding.BASE16, "xx6553f100000000"),
            (Encoding.BASE32, "ABSVH4IAAAAA0==="),
            (Encoding.BASE58, "0OIl"),
            (Encoding.BASE64, "AGVT8QAA!AA="),
        ],
    )
    def test_malformed_text(self, encoding: Encoding, payload: str) -> None:
        with pytest.raises(DecodingError):
            Uid.decode(payload, encoding)

    @pytest.mark.parametrize(
        "encoding, payload",
        [
            (Encoding.BASE32, "ABSVH4IAAAAAB==="),
            (Encoding.BASE32_NOPAD, "ABSVH4IAAAAAB"),
            (Encoding.BASE64, "AGVT8QAAAAB="),
            (Encoding.BASE64_NOPAD, "AGVT8QAAAAB"),
        ],
    )
    def test_trailing_bits_do_not_alias(self, encoding: Encoding, payload: str) -> None:
        with pytest.raises(DecodingError, match="non-canonical trailing bits"):
            Uid.decode(payload, encoding)


class TestValueSemantics:
    def test_str_is_decimal(self) -> None:
        assert str(Uid(-42)) == "-42"
        assert str(Uid.new())

    def test_repr(self) -> None:
        assert repr(Uid(7)) == "Uid(value=7)"

    def test_immutable(self) -> None:
        uid = Uid(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            uid.value = 2

    def test_hashable_and_equal_by_value(self) -> None:
        assert Uid(5) == Uid.from_bytes(Uid(5).to_bytes())
        assert len({Uid(5), Uid(5), Uid(6)}) == 2
        assert Uid(5) != 5

    def test_transparent_serialization(self) -> None:
        uid = Uid.new()
        assert uid.serialize() == int(uid)
        assert Uid.parse(uid.serialize()) == uid
        assert Uid.parse(str(uid)) == uid

    @pytest.mark.parametrize("value", ["", "abc", "1.5", str(INT64_MAX + 1), INT64_MIN - 1])
    def test_parse_rejects_malformed(self, value) -> None:
        with pytest.raises(DecodingError):
            Uid.parse(value)
