"""Typer-based command line interface for the structured-string generators.

Every generating command prints ``--count`` values, one per line.  Without
``--seed`` the randomness discipline follows ``randomness.mode`` from the
configuration; with ``--seed`` output is replayable.

Exit codes
----------
0 success
2 usage error, invalid bounds or infeasible request
4 configuration error
5 bad-password corpus could not be loaded
6 password rejected by ``check-password``
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError as ConfigValidationError

from .config import ConfigModel, load_config
from .corpus import BadPasswordCorpus
from .data.words import default_word_list
from .policy import PASSWORD_POLICIES, PasswordPolicy, get_policy
from .rand.seed import ensure_secret_present
from .rand.source import SeededSource
from .synth.generator import Generator
from .utils.errors import CorpusLoadError, InputForgeError, ValidationError
from .utils.logging import configure_logging, get_logger
from .validate.password import validate_password_for

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="inputforge",
    help="Generate and check domains, e-mail addresses, passwords and passphrases.",
)

logger = get_logger(__name__)

_SEED = typer.Option(None, "--seed", help="Seed for replayable output")
_COUNT = typer.Option(1, "--count", "-n", min=1, help="Number of values to print")
_CONFIG = typer.Option(None, "--config", help="YAML config to override defaults")
_VERBOSE = typer.Option(False, "--verbose", "-v", help="Log debug messages to stderr")
_MIN = typer.Option(0, "--min", min=0, help="Minimum length; 0 with --max 0 means unset")
_MAX = typer.Option(0, "--max", min=0, help="Maximum length; 0 with --min 0 means unset")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ConfigValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _generator(cfg: ConfigModel, seed: int | None) -> Generator:
    if seed is not None:
        return Generator(SeededSource(seed), word_list=default_word_list(cfg))
    if cfg.randomness.mode == "seeded" and not ensure_secret_present(cfg, strict=False):
        logger.warning("seeded mode without a secret; output is predictable")
    return Generator.from_config(cfg)


def _emit(count: int, make: Callable[[], str]) -> None:
    """Print ``count`` values produced by ``make``, mapping errors to exit codes."""

    try:
        values = [make() for _ in range(count)]
    except CorpusLoadError as exc:
        _safe_exit(5, str(exc))
    except InputForgeError as exc:
        _safe_exit(2, str(exc))
    for value in values:
        typer.echo(value)


def _policy(
    name: str | None,
    min_length: int,
    max_length: int,
    lower: bool,
    upper: bool,
    digit: bool,
    special: bool,
) -> PasswordPolicy:
    if name is not None:
        try:
            return get_policy(name)
        except KeyError as exc:
            _safe_exit(2, str(exc.args[0]))
    try:
        return PasswordPolicy(min_length, max_length, lower, upper, digit, special)
    except InputForgeError as exc:
        _safe_exit(2, str(exc))


@app.callback()
def main() -> None:
    """Entry point for the inputforge command group."""
    pass


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def domain(  # noqa: PLR0913
    min_length: int = _MIN,
    max_length: int = _MAX,
    valid_tld: bool = typer.Option(False, "--valid-tld", help="End in a delegated TLD"),
    valid_cctld: bool = typer.Option(
        False, "--valid-cctld", help="End in a country-code TLD"
    ),
    seed: Optional[int] = _SEED,
    count: int = _COUNT,
    config_path: Optional[Path] = _CONFIG,
    verbose: bool = _VERBOSE,
) -> None:
    """Print random domain names."""

    if valid_tld and valid_cctld:
        _safe_exit(2, "--valid-tld and --valid-cctld are mutually exclusive")
    gen = _generator(_load(config_path, verbose), seed)
    if valid_tld:
        make = gen.domain_with_valid_tld
    elif valid_cctld:
        make = gen.domain_with_valid_cctld
    else:
        make = gen.domain
    _emit(count, lambda: make(min_length, max_length))


@app.command()
def email(  # noqa: PLR0913
    min_length: int = _MIN,
    max_length: int = _MAX,
    quoted: bool = typer.Option(False, "--quoted", help="Use a quoted local part"),
    ip: bool = typer.Option(False, "--ip", help="Use an IP literal domain part"),
    seed: Optional[int] = _SEED,
    count: int = _COUNT,
    config_path: Optional[Path] = _CONFIG,
    verbose: bool = _VERBOSE,
) -> None:
    """Print random e-mail addresses."""

    gen = _generator(_load(config_path, verbose), seed)
    _emit(
        count,
        lambda: gen.email(
            min_length, max_length, quoted_local_part=quoted, ip_domain_part=ip
        ),
    )


@app.command()
def password(  # noqa: PLR0913
    min_length: int = _MIN,
    max_length: int = _MAX,
    lower: bool = typer.Option(False, "--lower", help="Require a lowercase letter"),
    upper: bool = typer.Option(False, "--upper", help="Require an uppercase letter"),
    digit: bool = typer.Option(False, "--digit", help="Require a digit"),
    special: bool = typer.Option(False, "--special", help="Require a special character"),
    policy_name: Optional[str] = typer.Option(
        None, "--policy", help=f"Named policy [{'|'.join(PASSWORD_POLICIES)}]"
    ),
    avoid_bad: bool = typer.Option(
        True, "--avoid-bad/--allow-bad", help="Redraw passwords found in the corpus"
    ),
    seed: Optional[int] = _SEED,
    count: int = _COUNT,
    config_path: Optional[Path] = _CONFIG,
    verbose: bool = _VERBOSE,
) -> None:
    """Print random passwords."""

    cfg = _load(config_path, verbose)
    policy = _policy(policy_name, min_length, max_length, lower, upper, digit, special)
    corpus = BadPasswordCorpus.from_config(cfg) if avoid_bad else None
    gen = _generator(cfg, seed)
    _emit(count, lambda: gen.password_for(policy, corpus=corpus))


@app.command()
def passphrase(  # noqa: PLR0913
    min_words: int = typer.Option(0, "--min-words", min=0, help="Minimum word count"),
    max_words: int = typer.Option(0, "--max-words", min=0, help="Maximum word count"),
    separator: str = typer.Option("-", "--separator", help="Text placed between words"),
    capitalize: bool = typer.Option(False, "--capitalize", help="Capitalize every word"),
    append_digit: bool = typer.Option(False, "--digit", help="Append a digit to one word"),
    seed: Optional[int] = _SEED,
    count: int = _COUNT,
    config_path: Optional[Path] = _CONFIG,
    verbose: bool = _VERBOSE,
) -> None:
    """Print random passphrases."""

    gen = _generator(_load(config_path, verbose), seed)
    _emit(
        count,
        lambda: gen.passphrase(
            min_words,
            max_words,
            separator=separator,
            capitalize=capitalize,
            append_digit=append_digit,
        ),
    )


@app.command("check-password")
def check_password(  # noqa: PLR0913
    value: str = typer.Argument(..., help="Password to check"),
    min_length: int = _MIN,
    max_length: int = _MAX,
    lower: bool = typer.Option(False, "--lower", help="Require a lowercase letter"),
    upper: bool = typer.Option(False, "--upper", help="Require an uppercase letter"),
    digit: bool = typer.Option(False, "--digit", help="Require a digit"),
    special: bool = typer.Option(False, "--special", help="Require a special character"),
    policy_name: Optional[str] = typer.Option(
        None, "--policy", help=f"Named policy [{'|'.join(PASSWORD_POLICIES)}]"
    ),
    use_corpus: bool = typer.Option(
        True, "--corpus/--no-corpus", help="Reject passwords found in the corpus"
    ),
    config_path: Optional[Path] = _CONFIG,
    verbose: bool = _VERBOSE,
) -> None:
    """Check a password, printing every defect found."""

    cfg = _load(config_path, verbose)
    policy = _policy(policy_name, min_length, max_length, lower, upper, digit, special)
    corpus = BadPasswordCorpus.from_config(cfg) if use_corpus else None
    try:
        validate_password_for(value, policy, corpus=corpus)
    except ValidationError as exc:
        _safe_exit(6, str(exc))
    except CorpusLoadError as exc:
        _safe_exit(5, str(exc))
    typer.echo("ok")


if __name__ == "__main__":  # pragma: no cover
    app()
