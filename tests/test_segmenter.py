"""
Unit tests for MT799 block segmentation.
"""

import pytest

from swift_gateway.mt799 import Block, BlockSet, SegmentationPolicy, segment


class TestLookaheadSegmentation:
    """Default policy: marker to next marker."""

    def test_adjacent_blocks(self, sample_mt799: str, sample_blocks: dict):
        blocks = segment(sample_mt799)

        assert blocks == BlockSet(**sample_blocks)
        assert blocks.missing() == []

    def test_whitespace_between_blocks(self, sample_mt799_multiline: str, sample_blocks: dict):
        blocks = segment(sample_mt799_multiline, SegmentationPolicy.LOOKAHEAD)

        assert blocks == BlockSet(**sample_blocks)

    def test_missing_trailer_leaves_span_empty(self, sample_blocks: dict):
        raw = sample_blocks["basic_header"] + sample_blocks["application_header"] + sample_blocks["text_block"]

        blocks = segment(raw)

        assert blocks.trailer == ""
        assert blocks.text_block == sample_blocks["text_block"]
        assert blocks.missing() == [Block.TRAILER]

    def test_text_block_needs_no_closing_brace(self, sample_blocks: dict):
        raw = (
            sample_blocks["basic_header"]
            + sample_blocks["application_header"]
            + "{4:\n:20:REF\n"
            + sample_blocks["trailer"]
        )

        blocks = segment(raw)

        assert blocks.text_block == "{4:\n:20:REF"
        assert blocks.trailer == sample_blocks["trailer"]

    def test_marker_inside_free_text_splits_blocks(self, sample_blocks: dict):
        """Known limitation: no brace balancing, so an inner "{5:" ends the text block."""
        raw = (
            sample_blocks["basic_header"]
            + sample_blocks["application_header"]
            + "{4:\n:20:REF\n:79:PLEASE QUOTE {5: IN REPLY\n-}"
            + sample_blocks["trailer"]
        )

        blocks = segment(raw)

        assert blocks.text_block == "{4:\n:20:REF\n:79:PLEASE QUOTE"
        assert blocks.trailer.startswith("{5: IN REPLY")

    def test_empty_input(self):
        blocks = segment("")

        assert blocks == BlockSet()
        assert blocks.missing() == [Block.BASIC_HEADER, Block.APPLICATION_HEADER, Block.TEXT, Block.TRAILER]


class TestLineScanSegmentation:
    """Alternative policy: one block per line, text block spans lines."""

    def test_blocks_on_separate_lines(self, sample_mt799_multiline: str, sample_blocks: dict):
        blocks = segment(sample_mt799_multiline, SegmentationPolicy.LINE_SCAN)

        assert blocks.basic_header == sample_blocks["basic_header"]
        assert blocks.application_header == sample_blocks["application_header"]
        assert blocks.text_block == sample_blocks["text_block"] + "\n"
        assert blocks.trailer == sample_blocks["trailer"]

    def test_crlf_line_endings(self, sample_blocks: dict):
        raw = "\r\n".join([
            sample_blocks["basic_header"],
            sample_blocks["application_header"],
            "{4:",
            ":20:REF",
            "-}",
            sample_blocks["trailer"],
        ])

        blocks = segment(raw, SegmentationPolicy.LINE_SCAN)

        assert blocks.basic_header == sample_blocks["basic_header"]
        assert blocks.text_block == "{4:\n:20:REF\n-}\n"
        assert blocks.trailer == sample_blocks["trailer"]

    def test_single_line_message_is_one_block(self, sample_mt799: str):
        """Line scan only splits on line starts, so adjacent blocks stay together."""
        blocks = segment(sample_mt799, SegmentationPolicy.LINE_SCAN)

        assert blocks.basic_header.startswith("{1:")
        assert "{2:" in blocks.basic_header
        assert blocks.missing() == [Block.APPLICATION_HEADER, Block.TEXT, Block.TRAILER]

    def test_text_block_without_trailer_runs_to_end(self, sample_blocks: dict):
        raw = "\n".join([
            sample_blocks["basic_header"],
            sample_blocks["application_header"],
            "{4:",
            ":20:REF",
        ])

        blocks = segment(raw, SegmentationPolicy.LINE_SCAN)

        assert blocks.text_block == "{4:\n:20:REF\n"
        assert blocks.trailer == ""


class TestBlockSet:

    @pytest.mark.parametrize("block,field", [
        (Block.BASIC_HEADER, "basic_header"),
        (Block.APPLICATION_HEADER, "application_header"),
        (Block.TEXT, "text_block"),
        (Block.TRAILER, "trailer"),
    ])
    def test_span_lookup(self, sample_blocks: dict, block, field):
        blocks = BlockSet(**sample_blocks)
        assert blocks.span(block) == sample_blocks[field]
