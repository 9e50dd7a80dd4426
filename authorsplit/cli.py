"""Command-line interface for authorsplit.

Responsibilities:
- Expose user-facing commands for splitting text files into tokens.
- Convert CLI arguments and optional YAML config into `SplitConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_strategy_names, echo_token_table, exit_with_command_error
from .config import ConfigLoader, SplitConfig
from .errors import SplitStageError
from .io.document_loader import load_document
from .io.token_export import dump_token_payload, save_token_payload
from .pipeline import SplitPipeline
from .telemetry.logger import RunLogger
from .text.normalizer import NormalizationOperation, operation_from_config
from .text.stemmers import stemmer_names
from .text.tokenizers import tokenizer_names

app = typer.Typer(
    name="authorsplit",
    no_args_is_help=True,
    help="Split text into position-accurate tokens.",
)

_OUTPUT_FORMATS = frozenset({"table", "json"})


def _load_yaml_config(config_path: Path | None) -> SplitConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except SplitStageError:
        raise
    except FileNotFoundError as exc:
        raise SplitStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise SplitStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except Exception as exc:
        raise SplitStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    tokenizer: str | None,
    stemmer: str | None,
    normalize: list[str] | None,
    normalize_before_tokenize: bool | None,
) -> SplitConfig:
    """Resolve effective config from YAML defaults and explicit CLI overrides."""

    config = _load_yaml_config(config_file) or SplitConfig()

    if tokenizer is not None:
        config = replace(config, tokenizer=tokenizer)
    if stemmer is not None:
        config = replace(config, stemmer=stemmer if stemmer.lower() != "none" else None)
    if normalize is not None:
        operations: list[NormalizationOperation] = []
        for tag in normalize:
            operation = operation_from_config(tag)
            if operation is not None:
                operations.append(operation)
        config = replace(config, normalization=tuple(operations))
    if normalize_before_tokenize is not None:
        config = replace(config, normalize_before_tokenize=normalize_before_tokenize)

    config.validate()
    return config


@app.command("split")
def split_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to a UTF-8 text file."),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with split options."),
    ] = None,
    tokenizer: Annotated[
        str | None,
        typer.Option("--tokenizer", help="Tokenizer strategy name."),
    ] = None,
    stemmer: Annotated[
        str | None,
        typer.Option("--stemmer", help="Stemmer name, or `none` to disable stemming."),
    ] = None,
    normalize: Annotated[
        list[str] | None,
        typer.Option(
            "--normalize",
            help="Normalization tag (`lowercase`, `diacritics`); repeat to chain.",
        ),
    ] = None,
    normalize_before_tokenize: Annotated[
        bool | None,
        typer.Option(
            "--normalize-before-tokenize/--normalize-after-tokenize",
            help="Normalize whole lines before tokenizing instead of each token after.",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: `table` or `json`."),
    ] = "table",
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write JSON token payload to this path."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Emit stage logs on stderr."),
    ] = False,
) -> None:
    """Split a text file into tokens and print them."""

    try:
        if output_format not in _OUTPUT_FORMATS:
            raise SplitStageError(
                stage="config",
                detail=f"Unsupported output format `{output_format}`.",
                hint="Use `--format table` or `--format json`.",
            )
        config = _resolve_config(
            config_file=config_file,
            tokenizer=tokenizer,
            stemmer=stemmer,
            normalize=normalize,
            normalize_before_tokenize=normalize_before_tokenize,
        )
        document = load_document(input_file)
        pipeline = SplitPipeline(run_logger=RunLogger() if verbose else None)
        pipeline.process(document, config)
    except Exception as exc:
        exit_with_command_error("split", exc)

    if out is not None:
        save_token_payload(out, document)
        typer.echo(f"Tokens written: {out}")
        return
    if output_format == "json":
        typer.echo(dump_token_payload(document))
        return
    echo_token_table(document)


@app.command("strategies")
def strategies_command() -> None:
    """List supported tokenizer and stemmer names."""

    echo_strategy_names("Tokenizers", tokenizer_names())
    echo_strategy_names("Stemmers", stemmer_names())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
