"""CLI tests for the `split` and `strategies` commands."""

from __future__ import annotations

import json
from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from authorsplit.cli import app
from authorsplit.errors import MappingError


def test_split_prints_token_table(sample_text_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["split", str(sample_text_path)])

    assert result.exit_code == 0, result.output
    assert "0\t1:0-3\tone\tone" in result.output
    assert "6\t2:13-14\t.\t." in result.output
    assert "8\t4:4-7\tthe\tthe" in result.output
    assert "Processed stages: split" in result.output


def test_split_json_output_with_stemmer(sample_text_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["split", str(sample_text_path), "--stemmer", "porter", "--format", "json"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["processed_stages"] == ["split", "stem"]
    assert [token["stem"] for token in payload["tokens"][3:7]] == ["on", "two", "three", "."]
    assert payload["tokens"][3]["location"]["begin_line"] == 2


def test_split_normalize_before_tokenize_reports_original_text(tmp_path: Path) -> None:
    input_path = tmp_path / "accents.txt"
    input_path.write_text("Cr\u00e8me br\u00fbl\u00e9e\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "split",
            str(input_path),
            "--normalize",
            "diacritics",
            "--normalize-before-tokenize",
            "--format",
            "json",
        ],
    )

    assert result.exit_code == 0, result.output
    tokens = json.loads(result.output)["tokens"]
    assert [(token["text"], token["normalized"]) for token in tokens] == [
        ("Cr\u00e8me", "Creme"),
        ("br\u00fbl\u00e9e", "brulee"),
    ]


def test_split_uses_yaml_config_with_cli_override(tmp_path: Path) -> None:
    input_path = tmp_path / "input.txt"
    input_path.write_text("Hello, world!\n", encoding="utf-8")
    config_path = tmp_path / "split.yaml"
    config_path.write_text("tokenizer: plain-word\nstemmer: porter\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "split",
            str(input_path),
            "--config",
            str(config_path),
            "--stemmer",
            "none",
            "--format",
            "json",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [token["text"] for token in payload["tokens"]] == ["Hello", "world"]
    assert payload["processed_stages"] == ["split"]


def test_split_writes_json_file(sample_text_path: Path, tmp_path: Path) -> None:
    out_path = tmp_path / "out" / "tokens.json"
    runner = CliRunner()

    result = runner.invoke(app, ["split", str(sample_text_path), "--out", str(out_path)])

    assert result.exit_code == 0, result.output
    assert f"Tokens written: {out_path}" in result.output
    assert len(json.loads(out_path.read_text(encoding="utf-8"))["tokens"]) == 9


def test_split_reports_unknown_tokenizer(sample_text_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["split", str(sample_text_path), "--tokenizer", "bogus"])

    assert result.exit_code == 1
    assert "split failed at stage `config`: Unknown tokenizer `bogus`." in result.output
    assert "Hint: Supported tokenizers:" in result.output


def test_split_reports_missing_input_file(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["split", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "split failed at stage `load`" in result.output


def test_split_reports_missing_config_file(sample_text_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app, ["split", str(sample_text_path), "--config", "missing-split.yaml"]
    )

    assert result.exit_code == 1
    assert "Config file not found: `missing-split.yaml`." in result.output


def test_split_reports_invalid_config_keys(sample_text_path: Path, tmp_path: Path) -> None:
    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("speed: fast\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app, ["split", str(sample_text_path), "--config", str(config_path)]
    )

    assert result.exit_code == 1
    assert "split failed at stage `config`" in result.output
    assert "unsupported key(s): speed" in result.output


def test_split_reports_unsupported_format(sample_text_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["split", str(sample_text_path), "--format", "xml"])

    assert result.exit_code == 1
    assert "Unsupported output format `xml`." in result.output


def test_split_reports_mapping_failures(
    monkeypatch: MonkeyPatch, sample_text_path: Path
) -> None:
    """Mapping failures should surface as stage-aware diagnostics."""

    def _failing_process(*_: object, **__: object) -> None:
        raise MappingError(token="ghost", scanned_text="one two three", cursor=13)

    monkeypatch.setattr("authorsplit.cli.SplitPipeline.process", _failing_process)
    runner = CliRunner()

    result = runner.invoke(app, ["split", str(sample_text_path)])

    assert result.exit_code == 1
    assert "split failed at stage `split`: Cannot find text of `ghost`" in result.output


def test_strategies_lists_tokenizers_and_stemmers() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["strategies"])

    assert result.exit_code == 0
    assert "Tokenizers:" in result.output
    assert "  word-punctuation-split" in result.output
    assert "  treebank" in result.output
    assert "Stemmers:" in result.output
    assert "  porter" in result.output
