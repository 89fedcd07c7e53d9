from __future__ import annotations

"""
Unit tests for the codec execution engine.

Verifies:
1. Mode routing (encode, decode, demo).
2. Conversion of fatal decode errors into error results.
3. Optional tree inspection lines.
4. Tree shape reported in the success summary.
"""

from morsetree.core.pipeline.engine import run_codec, run_demo
from morsetree.core.pipeline.validator import validate_config


def _cfg(**overrides):
    cfg, _ = validate_config(overrides)
    return cfg


def test_run_demo_round_trip(tree) -> None:
    encoded, decoded = run_demo("sos", tree)

    assert encoded == "... --- ... "
    assert decoded == "sos "


def test_run_codec_encode(tree) -> None:
    result = run_codec(_cfg(mode="encode", text="SOS"), tree)

    assert result.ok is True
    assert result.mode == "encode"
    assert result.output_text == "... --- ... "
    assert result.tree_lines == []


def test_run_codec_decode(tree) -> None:
    result = run_codec(_cfg(mode="decode", text="-- --- .-. ... ."), tree)

    assert result.ok is True
    assert result.output_text == "morse "


def test_run_codec_demo_uses_default_text(tree) -> None:
    result = run_codec(_cfg(), tree)

    assert result.mode == "demo"
    assert result.summary["encoded"] == ".... . .-.. .-.. ---  .-- --- .-. .-.. -.. "
    assert result.output_text == "hello world "


def test_run_codec_builds_tree_when_omitted() -> None:
    result = run_codec(_cfg(mode="encode", text="e"))

    assert result.output_text == ". "


def test_run_codec_fatal_decode_error_becomes_error_result(tree) -> None:
    result = run_codec(_cfg(mode="decode", text="... x"), tree)

    assert result.ok is False
    assert "'x'" in result.error
    assert result.output_text == ""
    assert result.summary == {"char": "x", "code": "x"}


def test_run_codec_inspection_lines(tree) -> None:
    result = run_codec(_cfg(mode="encode", text="e", print_tree=True, show_table=True), tree)

    # 44 tree lines followed by 43 table lines
    assert len(result.tree_lines) == 87
    assert result.tree_lines[0] == "' '"
    assert result.tree_lines[44] == "e  ."


def test_run_codec_summary_reports_tree_shape(tree) -> None:
    result = run_codec(_cfg(mode="decode", text="."), tree)

    assert result.summary["tree_nodes"] == 44
    assert result.summary["tree_depth"] == 5


def test_run_codec_summary_tracks_custom_tree() -> None:
    from morsetree.domain.alphabet import build_tree_from_codes

    small = build_tree_from_codes({".": "e", "-": "t", "..": "i"})
    result = run_codec(_cfg(mode="demo", text="tie"), small)

    assert result.output_text == "tie "
    assert result.summary["tree_nodes"] == 4
    assert result.summary["tree_depth"] == 2
