"""Tests for the SRT block and file grammar."""

import pytest

from subrip.models.srt import Subtitle
from subrip.services.grammar import (
    match_block,
    match_file,
    match_index,
    match_text,
    match_timespan,
    skip_blank_lines,
)
from tests.conftest import FAMILY_BLOCKS, build_srt


def expected_entries():
    return [Subtitle(index, 0, 0, "\n".join(lines)) for index, _, lines in FAMILY_BLOCKS]


class TestLineMatchers:
    """Tests for the single-line matchers."""

    def test_index_line(self):
        """Test an index line is digits plus a line ending."""
        assert match_index("231\n", 0) == (231, 4)
        assert match_index("231\r\n", 0) == (231, 5)

    def test_index_requires_line_ending(self):
        """Test an index line must end the line."""
        assert match_index("231", 0) is None
        assert match_index("23a\n", 0) is None

    def test_index_beyond_32_bits(self):
        """Test indices that do not fit 32 bits are rejected."""
        assert match_index("4294967295\n", 0) == (4294967295, 11)
        assert match_index("4294967296\n", 0) is None

    def test_timespan(self):
        """Test start and end are read around the arrow."""
        line = "00:00:02,002 --> 00:00:05,403\n"
        assert match_timespan(line, 0) == ((2002, 5403), len(line))

    def test_timespan_many_spaces(self):
        """Test more than one space around the arrow."""
        assert match_timespan("00:00:01,000   -->  00:00:02,000", 0) == ((1000, 2000), 32)

    def test_timespan_trailing_whitespace(self):
        """Test spaces or tabs after the end timestamp are ignored."""
        line = "00:00:01,000 --> 00:00:02,000 \t\r\n"
        assert match_timespan(line, 0) == ((1000, 2000), len(line))
        assert match_timespan("00:00:01,000 --> 00:00:02,000  ", 0) == ((1000, 2000), 31)

    @pytest.mark.parametrize(
        "line",
        [
            "00:00:01,000-->00:00:02,000\n",
            "00:00:01,000 -> 00:00:02,000\n",
            "00:00:01,000\t-->\t00:00:02,000\n",
            "00:00:01,000 --> 00:00:02,000 X1:10\n",
            "00:00:01.000 --> 00:00:02,000\n",
        ],
    )
    def test_timespan_rejected(self, line):
        """Test only spaces and a bare line end are accepted around the timestamps."""
        assert match_timespan(line, 0) is None

    def test_blank_lines(self):
        """Test empty and whitespace-only lines are skipped."""
        content = "\n\r\n  \n\t\r\ntext"
        assert skip_blank_lines(content, 0) == content.index("text")

    def test_text_stops_at_blank_line(self):
        """Test caption text ends at the separator and uses \\n internally."""
        content = "line one\r\nline two\r\n\r\n2\n"
        text, pos = match_text(content, 0)
        assert text == "line one\nline two"
        assert content[pos:] == "\r\n2\n"

    def test_text_stops_at_next_block(self):
        """Test a following block is not swallowed as caption text."""
        content = "caption\n2\n00:00:03,000 --> 00:00:04,000\nnext\n"
        text, pos = match_text(content, 0)
        assert text == "caption"
        assert content[pos:].startswith("2\n")

    def test_text_keeps_number_only_caption(self):
        """Test a caption line of digits stays text when no timespan follows."""
        text, _ = match_text("42\nis the answer\n", 0)
        assert text == "42\nis the answer"

    def test_text_keeps_whitespace_only_line(self):
        """Test a spaces-only line inside a caption stays part of the text."""
        content = "Hello\n  \nworld\n\n2\n00:00:03,000 --> 00:00:04,000\nBye\n"
        text, pos = match_text(content, 0)
        assert text == "Hello\n  \nworld"
        assert content[pos:].startswith("\n2\n")

    def test_text_whitespace_line_before_next_block(self):
        """Test a spaces-only line still separates captions from the next block."""
        content = "Hello\n  \n2\n00:00:03,000 --> 00:00:04,000\nBye\n"
        text, pos = match_text(content, 0)
        assert text == "Hello"
        assert content[pos:] == "  \n2\n00:00:03,000 --> 00:00:04,000\nBye\n"

    def test_text_whitespace_line_at_end_of_input(self):
        """Test trailing spaces-only lines are not caption text."""
        text, pos = match_text("Hello\n \t\n  ", 0)
        assert text == "Hello"
        assert pos == 6


class TestMatchBlock:
    """Tests for match_block function."""

    @pytest.mark.parametrize("line_ending", ["\n", "\r\n"])
    @pytest.mark.parametrize("blank_after_timespan", [False, True])
    @pytest.mark.parametrize("final_separator", [False, True])
    def test_each_block(self, line_ending, blank_after_timespan, final_separator):
        """Test every block parses alone, whatever its line endings and padding."""
        for (index, timespan, lines), expected in zip(FAMILY_BLOCKS, expected_entries()):
            content = build_srt(
                [(index, timespan, lines)], line_ending, blank_after_timespan, final_separator
            )
            entry, pos = match_block(content, 0)
            assert pos == len(content)
            assert entry.index == expected.index
            assert entry.text == expected.text

    def test_block_without_final_line_ending(self):
        """Test the last caption line may end the input."""
        content = "7\n00:00:01,000 --> 00:00:02,000\nbye"
        entry, pos = match_block(content, 0)
        assert entry == Subtitle(7, 1000, 2000, "bye")
        assert pos == len(content)

    def test_empty_text_block(self):
        """Test a block whose timespan is directly followed by the separator."""
        content = "1\n00:00:01,000 --> 00:00:02,000\n\n2\n00:00:03,000 --> 00:00:04,000\nB\n"
        entry, pos = match_block(content, 0)
        assert entry == Subtitle(1, 1000, 2000, "")
        assert content[pos:].startswith("2\n")

    def test_empty_text_at_end_of_input(self):
        """Test a timespan line may be the last thing in the input."""
        entry, pos = match_block("1\n00:00:01,000 --> 00:00:02,000", 0)
        assert entry == Subtitle(1, 1000, 2000, "")
        assert pos == 31

    def test_markup_passed_through(self):
        """Test tags in caption text are left alone."""
        content = "1\n00:00:01,000 --> 00:00:02,000\n{\\an8}<b>Loud</b> & <font color=red>red</font>\n"
        entry, _ = match_block(content, 0)
        assert entry.text == "{\\an8}<b>Loud</b> & <font color=red>red</font>"

    def test_malformed_timestamp(self):
        """Test a bad timestamp makes the block fail."""
        assert match_block("1\n00:00:0a,000 --> 00:00:02,000\ntext\n", 0) is None

    def test_missing_index(self):
        """Test a block must start with its index."""
        assert match_block("00:00:01,000 --> 00:00:02,000\ntext\n", 0) is None


class TestMatchFile:
    """Tests for match_file function."""

    @pytest.mark.parametrize("line_ending", ["\n", "\r\n"])
    @pytest.mark.parametrize("blank_after_timespan", [False, True])
    @pytest.mark.parametrize("final_separator", [False, True])
    def test_whole_file(self, line_ending, blank_after_timespan, final_separator):
        """Test all blocks parse and the input is fully consumed."""
        content = build_srt(FAMILY_BLOCKS, line_ending, blank_after_timespan, final_separator)
        entries, pos = match_file(content)
        assert pos == len(content)
        assert [(e.index, e.text) for e in entries] == [
            (e.index, e.text) for e in expected_entries()
        ]
        assert [(e.start, e.end) for e in entries] == [
            (2002, 5403),
            (5505, 7496),
            (7607, 9598),
        ]

    def test_mixed_line_endings(self):
        """Test \\n and \\r\\n may be mixed within one file."""
        content = "1\r\n00:00:01,000 --> 00:00:02,000\nA\r\n\n2\n00:00:03,000 --> 00:00:04,000\r\nB\n"
        entries, pos = match_file(content)
        assert pos == len(content)
        assert [e.text for e in entries] == ["A", "B"]

    def test_byte_order_marks_and_leading_blank_lines(self):
        """Test BOMs and leading blank lines are skipped."""
        content = "\ufeff\ufeff\n\n1\n00:00:01,000 --> 00:00:02,000\nA\n"
        entries, pos = match_file(content)
        assert pos == len(content)
        assert entries == [Subtitle(1, 1000, 2000, "A")]

    def test_missing_separator_between_blocks(self):
        """Test consecutive blocks without a blank line between them."""
        content = "1\n00:00:01,000 --> 00:00:02,000\nA\n2\n00:00:03,000 --> 00:00:04,000\nB\n"
        entries, _ = match_file(content)
        assert [e.text for e in entries] == ["A", "B"]

    def test_empty_input(self):
        """Test empty input is a full match with no blocks."""
        assert match_file("") == ([], 0)

    def test_stops_at_junk(self):
        """Test matching stops at the first character that starts no block."""
        content = "1\n00:00:01,000 --> 00:00:02,000\nA\n\nTHE END\n"
        entries, pos = match_file(content)
        assert len(entries) == 1
        assert content[pos:] == "THE END\n"

    def test_junk_only(self):
        """Test junk at the start yields no blocks and position zero."""
        assert match_file("not a subtitle") == ([], 0)
