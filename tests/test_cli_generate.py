from __future__ import annotations

from typer.testing import CliRunner

from inputforge.cli import app
from inputforge.policy import SERVICE_ACCOUNT
from inputforge.validate import (
    validate_domain,
    validate_email,
    validate_passphrase,
    validate_password_for,
)


def _lines(args: list[str]) -> list[str]:
    runner = CliRunner()
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    return result.stdout.splitlines()


def test_domain_count_and_bounds() -> None:
    lines = _lines(["domain", "--min", "20", "--max", "30", "--count", "5", "--seed", "1"])
    assert len(lines) == 5
    for line in lines:
        assert 20 <= len(line) <= 30
        validate_domain(line, 20, 30)


def test_seed_replays() -> None:
    args = ["email", "--count", "3", "--seed", "42"]
    assert _lines(args) == _lines(args)


def test_domain_with_valid_tld() -> None:
    (line,) = _lines(["domain", "--valid-tld", "--seed", "3"])
    assert "." in line


def test_email_ip_literal() -> None:
    for line in _lines(["email", "--ip", "--quoted", "--count", "4", "--seed", "8"]):
        assert line.endswith("]")
        validate_email(line, quoted_local_part=True, ip_domain_part=True)


def test_password_policy() -> None:
    for line in _lines(["password", "--policy", "service_account", "--count", "3"]):
        validate_password_for(line, SERVICE_ACCOUNT)


def test_password_flags() -> None:
    (line,) = _lines(
        ["password", "--min", "4", "--max", "4", "--lower", "--upper", "--digit", "--special"]
    )
    assert len(line) == 4


def test_passphrase() -> None:
    args = ["passphrase", "--min-words", "4", "--max-words", "4", "--separator", "_"]
    args += ["--capitalize", "--digit", "--seed", "5"]
    (line,) = _lines(args)
    assert len(line.split("_")) == 4
    validate_passphrase(line, 4, 4, separator="_", capitalize=True, append_digit=True)


def test_check_password_ok() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["check-password", "Xq7#vLm2!pRt", "--lower", "--upper", "--digit", "--special"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "ok"
