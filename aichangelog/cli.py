"""CLI entry point for aichangelog."""

from pathlib import Path
from typing import Optional

import typer

from aichangelog import __version__
from aichangelog.config import out_of_range_warnings, resolve_config
from aichangelog.exceptions import ConfigError
from aichangelog.git import (
    GitError,
    NoCommitsError,
    get_commit_messages,
    get_repo_root,
    resolve_range,
)
from aichangelog.llm import LLMError, generate_changelog

app = typer.Typer(
    name="aichangelog",
    help="AI-powered changelog generator using git commit history",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"aichangelog {__version__}")
        raise typer.Exit()


@app.command()
def main(
    rev_range: Optional[str] = typer.Argument(
        None,
        metavar="RANGE",
        help="Revision range to generate the changelog from (e.g. v1.0..HEAD). "
        "Defaults to everything since the last tag.",
    ),
    short: bool = typer.Option(
        False,
        "--short",
        "-s",
        help="Only use the first line of each commit message to reduce tokens",
    ),
    temperature: Optional[float] = typer.Option(
        None,
        "--temp",
        "-t",
        metavar="TEMP",
        help="Sampling temperature, 0.0 to 2.0 [default: 1.0]",
    ),
    frequency_penalty: Optional[float] = typer.Option(
        None,
        "--freq",
        "-f",
        metavar="FREQ",
        help="Frequency penalty, -2.0 to 2.0 [default: 0.0]",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        metavar="MODEL",
        help="OpenAI model to use [default: gpt-3.5-turbo]",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the changelog to this file",
    ),
    max_chars: Optional[int] = typer.Option(
        None,
        "--max-chars",
        help="Maximum characters of commit text sent to the model [default: 50000]",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the range, commit count, model and token usage on stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a Markdown changelog from git commit messages."""
    try:
        # Step 1: Resolve configuration (fails fast on a missing API key)
        config = resolve_config(
            short=short,
            temperature=temperature,
            frequency_penalty=frequency_penalty,
            model=model,
            rev_range=rev_range,
            max_chars=max_chars,
        )
        for warning in out_of_range_warnings(config):
            typer.echo(f"Warning: {warning}; sending it to the API unchanged.", err=True)

        # Step 2: Collect commit history
        get_repo_root()
        typer.echo("Collecting commit history...", err=True)
        resolved_range = resolve_range(config.rev_range)
        messages = get_commit_messages(resolved_range, short=config.short)

        if verbose:
            typer.echo(f"Range: {resolved_range}", err=True)
            typer.echo(f"Commits: {len(messages)}", err=True)
            typer.echo(f"Model: {config.model}", err=True)
            typer.echo(
                f"Temperature: {config.temperature}, frequency penalty: {config.frequency_penalty}",
                err=True,
            )

        # Step 3: Request the changelog
        typer.echo("Generating changelog...", err=True)
        result = generate_changelog(messages, resolved_range, config)

    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except NoCommitsError as e:
        typer.echo(f"Nothing to do: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)

    if verbose:
        typer.echo(
            f"Tokens: {result.input_tokens} input / {result.output_tokens} output ({result.model})",
            err=True,
        )

    # Step 4: Print the changelog
    typer.echo(result.changelog)

    if output:
        try:
            output.write_text(result.changelog + "\n")
        except OSError as e:
            typer.echo(f"Error: could not write {output}: {e}", err=True)
            raise typer.Exit(1)
        typer.echo(f"Changelog written to {output}", err=True)


if __name__ == "__main__":
    app()
