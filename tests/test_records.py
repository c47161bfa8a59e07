import pytest

from abprune.exceptions import MalformedRecordError
from abprune.records import RawRecord, is_header, iter_records, parse_line, read_records


class TestParseLine:
    """Tests for single-line parsing."""

    def test_three_integers(self):
        assert parse_line("4 1 -7\n") == RawRecord(node_id=4, parent_id=1, value=-7)

    def test_tabs_and_surrounding_whitespace(self):
        assert parse_line("  4\t1   3  ") == RawRecord(4, 1, 3)

    def test_trailing_fields_are_ignored(self):
        assert parse_line("4 1 3 comment here") == RawRecord(4, 1, 3)

    @pytest.mark.parametrize("line", ["", "   ", "4 1", "a b c", "4 1 x", "4 1.5 3", "node parent value"])
    def test_unparseable_lines_yield_none(self, line):
        assert parse_line(line) is None

    @pytest.mark.parametrize(
        "line",
        [
            "1_0 0 3",
            "\u0661\u0662 0 3",
            "\uff11 0 3",
            "1 0 2147483648",
            "1 0 -2147483649",
            "1 0 --3",
            "1 0 0x10",
        ],
    )
    def test_non_decimal_or_out_of_range_fields_yield_none(self, line):
        assert parse_line(line) is None

    def test_signed_32_bit_bounds(self):
        assert parse_line("1 0 2147483647") == RawRecord(1, 0, 2**31 - 1)
        assert parse_line("1 0 -2147483648") == RawRecord(1, 0, -(2**31))
        assert parse_line("+1 0 -3") == RawRecord(1, 0, -3)


class TestCoerce:
    """Tests for RawRecord.coerce."""

    def test_accepts_ints_and_integer_strings(self):
        assert RawRecord.coerce((1, "0", " 5 ")) == RawRecord(1, 0, 5)

    def test_returns_existing_record_unchanged(self):
        record = RawRecord(1, 0, 5)
        assert RawRecord.coerce(record) is record

    @pytest.mark.parametrize(
        "item",
        [
            (1, 0),
            (1, 0, 5, 6),
            (1, 0, "five"),
            (1, 0, 2.5),
            (1, True, 5),
            (1, 0, 2**31),
            (1, 0, -(2**31) - 1),
            "1 0 5",
            None,
            42,
        ],
    )
    def test_rejects_malformed_items(self, item):
        with pytest.raises(MalformedRecordError):
            RawRecord.coerce(item)

    def test_is_root(self):
        assert RawRecord(0, -1, 0).is_root
        assert not RawRecord(1, 0, 0).is_root


class TestIterRecords:
    """Tests for multi-line record streams."""

    def test_header_on_first_line_is_skipped(self):
        lines = ["节点ID 父节点ID 值", "0 -1 0", "1 0 3"]
        assert list(iter_records(lines)) == [RawRecord(0, -1, 0), RawRecord(1, 0, 3)]

    def test_header_after_blank_lines_is_skipped(self):
        lines = ["", "  ", "node_id parent value", "0 -1 0"]
        assert list(iter_records(lines)) == [RawRecord(0, -1, 0)]

    def test_header_check_only_applies_to_first_content_line(self):
        lines = ["0 -1 0", "1 0 3 id"]
        # Trailing text on a record line does not make it a header.
        assert list(iter_records(lines)) == [RawRecord(0, -1, 0), RawRecord(1, 0, 3)]

    def test_noise_is_dropped_and_order_kept(self):
        noisy = ["Tree dump", "0 -1 0", "", "garbage line", "2 0 9", "1 0 x", "1 0 4"]
        clean = ["0 -1 0", "2 0 9", "1 0 4"]
        assert list(iter_records(noisy)) == list(iter_records(clean))

    def test_custom_header_markers(self):
        assert is_header("ID PARENT VALUE", ("PARENT",))
        assert list(iter_records(["ID PARENT VALUE", "0 -1 0"], header_markers=("PARENT",))) == [
            RawRecord(0, -1, 0)
        ]


def test_read_records_from_file(tree_file):
    records = read_records(tree_file)
    assert len(records) == 16
    assert records[0] == RawRecord(0, -1, 0)
    assert records[-1] == RawRecord(15, 6, 9)


def test_read_records_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_records(tmp_path / "missing.txt")


def test_read_records_skips_undecodable_header(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_bytes("结点ID 父结点ID 值\n0 -1 0\n1 0 3\n".encode("gbk"))
    assert read_records(path) == [RawRecord(0, -1, 0), RawRecord(1, 0, 3)]
