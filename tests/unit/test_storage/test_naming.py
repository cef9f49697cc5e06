"""Tests for namestore.storage.naming module.

Covers:
    - encode_name: base32 output, chunking, marker placement
    - decode_name: marker checks, anchored removal, padding, case, errors
    - round-trips for awkward names
    - NameCodec: marker validation
"""

import base64
import dataclasses
import os

import pytest

from namestore.storage.exceptions import ConfigurationError, MalformedNameError
from namestore.storage.naming import (
    CHUNK_WIDTH,
    NameCodec,
    chunk,
    decode_name,
    encode_name,
    to_bytes,
)

LONG_B32 = "PB4HQ6DY" * 4  # base32 of b"x" * 20, exactly one chunk


@pytest.mark.fast
class TestEncodeName:
    """Tests for encode_name()."""

    def test_basic_name(self):
        assert encode_name("reports/q1.csv", "f_", ".bin") == "f_OJSXA33SORZS64JRFZRXG5Q=.bin"

    def test_keeps_padding(self):
        assert encode_name(b"a", "f_", ".bin") == "f_ME======.bin"

    def test_empty_name(self):
        assert encode_name(b"", "f_", ".bin") == "f_.bin"

    def test_str_and_bytes_agree(self):
        assert encode_name("naïve", "f_", ".bin") == encode_name("naïve".encode(), "f_", ".bin")

    def test_splits_into_chunks(self):
        path = encode_name(b"x" * 25, "f_", ".bin")
        assert path == f"f_{LONG_B32}{os.sep}PB4HQ6DY.bin"

    def test_exact_chunk_has_no_separator(self):
        path = encode_name(b"x" * 20, "f_", ".bin")
        assert path == f"f_{LONG_B32}.bin"
        assert os.sep not in path

    def test_markers_touch_chunks(self):
        path = encode_name(b"x" * 25, "f_", ".bin")
        assert not path.startswith(f"f_{os.sep}")
        assert not path.endswith(f"{os.sep}.bin")

    def test_only_base32_between_markers(self):
        path = encode_name(bytes(range(256)), "f_", ".bin")
        body = path[len("f_"):-len(".bin")].replace(os.sep, "")
        assert set(body) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567=")

    def test_chunk_width(self):
        name = os.urandom(10_000)
        path = encode_name(name, "f_", ".bin")
        parts = path[len("f_"):-len(".bin")].split(os.sep)
        assert all(len(part) <= CHUNK_WIDTH for part in parts)
        assert all(len(part) == CHUNK_WIDTH for part in parts[:-1])
        assert "".join(parts) == base64.b32encode(name).decode("ascii")


@pytest.mark.fast
class TestDecodeName:
    """Tests for decode_name()."""

    def test_basic_path(self):
        assert decode_name("f_OJSXA33SORZS64JRFZRXG5Q=.bin", "f_", ".bin") == b"reports/q1.csv"

    def test_wrong_prefix(self):
        with pytest.raises(MalformedNameError) as exc:
            decode_name("wrongprefixABCDE.suf", "PFX", ".suf")
        assert exc.value.path == "wrongprefixABCDE.suf"
        assert exc.value.prefix == "PFX"
        assert "wrongprefixABCDE.suf" in str(exc.value)

    def test_wrong_suffix(self):
        with pytest.raises(MalformedNameError):
            decode_name("f_ME======.txt", "f_", ".bin")

    def test_invalid_base32(self):
        with pytest.raises(MalformedNameError, match="invalid base32"):
            decode_name("f_AB!.bin", "f_", ".bin")

    def test_impossible_length(self):
        with pytest.raises(MalformedNameError):
            decode_name("f_A.bin", "f_", ".bin")

    def test_non_ascii_remainder(self):
        with pytest.raises(MalformedNameError):
            decode_name("f_MEé.bin", "f_", ".bin")

    def test_missing_padding_tolerated(self):
        assert decode_name("f_ME.bin", "f_", ".bin") == b"a"

    def test_lowercase_tolerated(self):
        assert decode_name("f_nbswy3dp.bin", "f_", ".bin") == b"hello"

    def test_removes_chunk_separators(self):
        path = f"f_{LONG_B32}{os.sep}PB4HQ6DY.bin"
        assert decode_name(path, "f_", ".bin") == b"x" * 25

    def test_removes_forward_slashes(self):
        assert decode_name(f"f_{LONG_B32}/PB4HQ6DY.bin", "f_", ".bin") == b"x" * 25

    def test_empty_remainder(self):
        assert decode_name("f_.bin", "f_", ".bin") == b""

    def test_prefix_removed_once(self):
        # "ME" also occurs inside the encoded body
        assert decode_name("MEME======", "ME", "") == b"a"

    def test_suffix_removed_once(self):
        assert decode_name("ME======ME", "", "ME") == b"a"

    def test_garbage_within_markers_decodes(self):
        # Only the markers and the alphabet are checked
        assert decode_name("f_hello.bin", "f_", ".bin") == base64.b32decode("HELLO===")


@pytest.mark.fast
class TestRoundTrip:
    """decode_name(encode_name(n)) == n."""

    @pytest.mark.parametrize(
        "name",
        [
            b"",
            b"a",
            b"reports/q1.csv",
            b"../../etc/passwd",
            b"back\\slash",
            b"\x00\n\t\r",
            "naïve/日本語 🚀".encode("utf-8"),
            bytes(range(256)),
            b"y" * 10_000,
        ],
    )
    def test_round_trip(self, name):
        for prefix, suffix in [("f_", ".bin"), ("~", "~"), ("data-", ".dat")]:
            assert decode_name(encode_name(name, prefix, suffix), prefix, suffix) == name


@pytest.mark.fast
class TestHelpers:
    """Tests for to_bytes() and chunk()."""

    def test_to_bytes_str(self):
        assert to_bytes("é") == b"\xc3\xa9"

    def test_to_bytes_bytes(self):
        assert to_bytes(b"\xff") == b"\xff"

    def test_chunk_empty(self):
        assert chunk("") == []

    def test_chunk_custom_width(self):
        assert chunk("abcdefg", width=3) == ["abc", "def", "g"]


@pytest.mark.fast
class TestNameCodec:
    """Tests for NameCodec validation and binding."""

    def test_encode_decode(self):
        codec = NameCodec("f_", ".bin")
        assert codec.encode("a") == "f_ME======.bin"
        assert codec.decode("f_ME======.bin") == b"a"

    @pytest.mark.parametrize(
        "prefix,suffix",
        [
            ("", ".bin"),
            ("f_", ""),
            ("PFX", ".bin"),
            ("f_", ".Bin"),
            ("f2_", ".bin"),
            ("f=", ".bin"),
            ("f/", ".bin"),
            ("f_", "/bin"),
            ("f_", ".bin."),
        ],
    )
    def test_rejects_ambiguous_markers(self, prefix, suffix):
        with pytest.raises(ConfigurationError):
            NameCodec(prefix, suffix)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            NameCodec("PFX", ".suf")

    def test_lowercase_markers_allowed(self):
        codec = NameCodec("store-", ".data")
        assert codec.decode(codec.encode(b"z")) == b"z"

    def test_frozen(self):
        codec = NameCodec("f_", ".bin")
        with pytest.raises(dataclasses.FrozenInstanceError):
            codec.prefix = "g_"
