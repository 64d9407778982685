"""Loading address datasets from plain and zstd-compressed JSON."""
import json

import pytest

import zstandard as zstd

from epoch_buckets.compression import is_compressed, pack, unpack
from epoch_buckets.dataset import DatasetError, dump_addresses, load_addresses, parse_addresses
from epoch_buckets.identifier import IdentifierError


def _write_json(path, value):
    path.write_text(json.dumps(value))
    return path


class TestLoad:

    def test_plain_json(self, tmp_path, make_addresses):
        addresses = make_addresses(50)
        path = _write_json(tmp_path / "addresses.json", [str(a) for a in addresses])
        loaded = load_addresses(path)
        assert loaded == addresses
        assert isinstance(loaded, tuple)

    def test_zstd_json(self, tmp_path, make_addresses):
        addresses = make_addresses(50)
        path = tmp_path / "addresses.json.zst"
        path.write_bytes(zstd.ZstdCompressor().compress(json.dumps([str(a) for a in addresses]).encode()))
        assert load_addresses(path) == addresses

    @pytest.mark.parametrize("name", ["addresses.json", "addresses.json.zst"])
    def test_dump_then_load(self, tmp_path, make_addresses, name):
        addresses = make_addresses(10)
        dump_addresses(tmp_path / name, addresses)
        assert load_addresses(tmp_path / name) == addresses

    def test_empty_array(self, tmp_path):
        assert load_addresses(_write_json(tmp_path / "a.json", [])) == ()


class TestFailures:

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="cannot open"):
            load_addresses(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text('["11111111111111111111111111111111",')
        with pytest.raises(DatasetError, match="malformed JSON"):
            load_addresses(path)

    def test_not_an_array(self, tmp_path):
        with pytest.raises(DatasetError, match="expected a JSON array"):
            load_addresses(_write_json(tmp_path / "a.json", {"a": 1}))

    def test_wrong_length_identifier(self, tmp_path, make_addresses):
        good = [str(a) for a in make_addresses(3)]
        path = _write_json(tmp_path / "a.json", good + ["1111"])
        with pytest.raises(DatasetError, match="address #3") as info:
            load_addresses(path)
        assert isinstance(info.value.__cause__, IdentifierError)

    def test_non_string_element(self):
        with pytest.raises(DatasetError, match="wrong type"):
            parse_addresses([42])

    def test_corrupt_zstd(self, tmp_path):
        path = tmp_path / "a.json.zst"
        path.write_bytes(b"not zstd at all")
        with pytest.raises(DatasetError, match="cannot decompress"):
            load_addresses(path)


class TestFraming:

    def test_plain_paths_pass_through(self):
        assert not is_compressed("addresses.json")
        assert pack("addresses.json", b"[]") == b"[]"
        assert unpack("addresses.json", b"[]") == b"[]"

    def test_zst_paths_are_framed(self):
        assert is_compressed("addresses.json.zst")
        framed = pack("addresses.json.zst", b"[1, 2, 3]")
        assert framed != b"[1, 2, 3]"
        assert unpack("addresses.json.zst", framed) == b"[1, 2, 3]"
