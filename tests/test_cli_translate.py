"""CLI translation stories: translate and compare commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner

from digitwords.adapters import cli as cli_mod
from digitwords.adapters.cli.exit_codes import ExitCode

ConfigContext = Callable[[dict[str, Any]], Callable[[], Any]]


@pytest.mark.os_agnostic
def test_translate_prints_reference_translation(cli_runner: CliRunner, default_factory: Callable[[], Any]) -> None:
    """The canonical code translates with the default configuration."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", "123413"], obj=default_factory)

    assert result.exit_code == 0
    assert result.stdout == "<one><two><three><?><one><three>\n"


@pytest.mark.os_agnostic
def test_translate_prints_one_line_per_code(cli_runner: CliRunner, default_factory: Callable[[], Any]) -> None:
    """Several codes produce several lines, in order."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", "1", "4", "32"], obj=default_factory)

    assert result.stdout.splitlines() == ["<one>", "<?>", "<three><two>"]


@pytest.mark.os_agnostic
def test_translate_accepts_empty_code(cli_runner: CliRunner, default_factory: Callable[[], Any]) -> None:
    """An empty argument translates to an empty line."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", ""], obj=default_factory)

    assert result.exit_code == 0
    assert result.stdout == "\n"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("style", ["imperative", "functional", "chain", "composed", "CHAIN"])
def test_translate_style_option_gives_same_output(
    cli_runner: CliRunner, default_factory: Callable[[], Any], style: str
) -> None:
    """Every style, in any case, prints the same translation."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", "--style", style, "12a"], obj=default_factory)

    assert result.exit_code == 0
    assert result.stdout == "<one><two><?>\n"


@pytest.mark.os_agnostic
def test_translate_language_option_switches_vocabulary(
    cli_runner: CliRunner, default_factory: Callable[[], Any]
) -> None:
    """--language french uses the French tokens."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", "--language", "french", "12321"], obj=default_factory)

    assert result.stdout == "<un><deux><trois><deux><un>\n"


@pytest.mark.os_agnostic
def test_translate_default_token_option_replaces_fallback(
    cli_runner: CliRunner, default_factory: Callable[[], Any]
) -> None:
    """--default-token changes the token for unknown symbols."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", "--default-token", "_", "19"], obj=default_factory)

    assert result.stdout == "<one>_\n"


@pytest.mark.os_agnostic
def test_translate_rejects_empty_default_token(cli_runner: CliRunner, default_factory: Callable[[], Any]) -> None:
    """An empty default token is an invalid argument."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", "--default-token", "", "1"], obj=default_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_translate_reads_style_and_language_from_config(
    cli_runner: CliRunner, config_cli_context: ConfigContext
) -> None:
    """Configuration supplies defaults when no options are given."""
    factory = config_cli_context({"translator": {"style": "composed", "language": "french", "default_token": "?"}})

    result = cli_runner.invoke(cli_mod.cli, ["translate", "1x"], obj=factory)

    assert result.stdout == "<un>?\n"


@pytest.mark.os_agnostic
def test_translate_options_win_over_config(cli_runner: CliRunner, config_cli_context: ConfigContext) -> None:
    """Explicit options override configured values."""
    factory = config_cli_context({"translator": {"language": "french"}})

    result = cli_runner.invoke(cli_mod.cli, ["translate", "--language", "english", "1"], obj=factory)

    assert result.stdout == "<one>\n"


@pytest.mark.os_agnostic
def test_set_override_changes_translation(cli_runner: CliRunner, config_cli_context: ConfigContext) -> None:
    """--set reaches the translator section."""
    factory = config_cli_context({"translator": {"language": "english"}})

    result = cli_runner.invoke(cli_mod.cli, ["--set", "translator.language=french", "translate", "3"], obj=factory)

    assert result.stdout == "<trois>\n"


@pytest.mark.os_agnostic
def test_invalid_translator_config_exits_with_config_error(
    cli_runner: CliRunner, config_cli_context: ConfigContext
) -> None:
    """A bad configured style maps to EX_CONFIG."""
    factory = config_cli_context({"translator": {"style": "baroque"}})

    result = cli_runner.invoke(cli_mod.cli, ["translate", "1"], obj=factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "translator" in result.output


@pytest.mark.os_agnostic
def test_unknown_style_option_is_a_usage_error(cli_runner: CliRunner, default_factory: Callable[[], Any]) -> None:
    """Click rejects styles outside the choice list."""
    result = cli_runner.invoke(cli_mod.cli, ["translate", "--style", "baroque", "1"], obj=default_factory)

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_translate_requires_a_code(cli_runner: CliRunner, default_factory: Callable[[], Any]) -> None:
    """At least one CODE argument is required."""
    result = cli_runner.invoke(cli_mod.cli, ["translate"], obj=default_factory)

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_compare_lists_every_style(
    cli_runner: CliRunner, default_factory: Callable[[], Any], strip_ansi: Callable[[str], str]
) -> None:
    """compare prints one row per style with identical output."""
    result = cli_runner.invoke(cli_mod.cli, ["compare", "1234"], obj=default_factory)

    plain = strip_ansi(result.stdout)
    assert result.exit_code == 0
    for style in ("imperative", "functional", "chain", "composed"):
        assert style in plain
    assert plain.count("<one><two><three><?>") == 4


@pytest.mark.os_agnostic
def test_compare_honours_language_option(
    cli_runner: CliRunner, default_factory: Callable[[], Any], strip_ansi: Callable[[str], str]
) -> None:
    """compare --language french shows French tokens."""
    result = cli_runner.invoke(cli_mod.cli, ["compare", "--language", "french", "2"], obj=default_factory)

    assert strip_ansi(result.stdout).count("<deux>") == 4


@pytest.mark.os_agnostic
@pytest.mark.parametrize("code", ["[/]", "[bold]12", ":smile:"])
def test_compare_prints_bracketed_codes_literally(
    cli_runner: CliRunner, default_factory: Callable[[], Any], strip_ansi: Callable[[str], str], code: str
) -> None:
    """Square brackets and colons in the code are shown as typed."""
    result = cli_runner.invoke(cli_mod.cli, ["compare", code], obj=default_factory)

    assert result.exit_code == 0
    assert repr(code) in strip_ansi(result.stdout)


@pytest.mark.os_agnostic
def test_compare_prints_bracketed_default_token_literally(
    cli_runner: CliRunner, config_cli_context: ConfigContext, strip_ansi: Callable[[str], str]
) -> None:
    """A configured default token that looks like a closing tag is printed as is."""
    factory = config_cli_context({"translator": {"default_token": "[/]"}})

    result = cli_runner.invoke(cli_mod.cli, ["compare", "9"], obj=factory)

    assert result.exit_code == 0
    assert strip_ansi(result.stdout).count("[/]") == 4
