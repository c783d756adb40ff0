import sys

import pytest

from cliparser.cli import AppInfo, CLIApp
from cliparser.command import Command
from cliparser.errors import (
    ConfigurationError,
    RequiredFlagNotProvided,
    UnknownFlag,
)
from cliparser.flag import Flag, FlagType, FlagValue


def create_test_app():
    return (
        CLIApp("test-app", "1.0.0", "Aplicação de testes")
        .add_global_flag(
            Flag("verbose", FlagType.BOOL, short="v", description="Modo verboso")
        )
        .add_global_flag(
            Flag(
                "config",
                FlagType.STRING,
                short="c",
                description="Arquivo de configuração",
                default_value=FlagValue(FlagType.STRING, "default.toml"),
            )
        )
    )


def test_app_creation():
    app = create_test_app()
    assert app.name == "test-app"
    assert app.version == "1.0.0"
    assert app.description == "Aplicação de testes"
    assert app.validate() is None


def test_create_app():
    app = CLIApp("app", "1.0.0", description="app teste")
    assert app.name == "app"
    assert app.version == "1.0.0"
    assert app.description == "app teste"
    assert app.root_command.name == "app"


def test_default_app():
    app = CLIApp()
    assert app.name == "app"
    assert app.version == "0.0.0"
    assert app.description == ""


def test_parse_simple_command():
    app = CLIApp("app", "1.0.0").add_command(
        Command("hello", description="Hello World").add_flag(
            Flag("name", FlagType.STRING, required=True)
        )
    )
    parsed = app.parse(["hello", "--name", "Rafael"])
    assert parsed.command == "app"
    assert parsed.subcommand == "hello"
    assert parsed.get_flag("name").as_string() == "Rafael"


def test_validation_duplicate_flags():
    app = (
        CLIApp("app", "1.0.0")
        .add_global_flag(Flag("name", FlagType.STRING, required=True))
        .add_global_flag(Flag("name", FlagType.STRING, required=True))
    )
    assert len(app.root_command.flags) == 1


def test_help_requested():
    app = CLIApp("app", "1.0.0")
    assert app.parse(["--help"]).help_requested is True


def test_global_flag_defaults_applied():
    parsed = create_test_app().parse(["-v"])
    assert parsed.get_flag("verbose") == FlagValue(FlagType.BOOL, True)
    assert parsed.get_flag("config") == FlagValue(FlagType.STRING, "default.toml")


def test_validate_duplicate_short():
    app = (
        CLIApp("app", "1.0.0")
        .add_global_flag(Flag("alpha", FlagType.BOOL, short="a"))
        .add_global_flag(Flag("another", FlagType.BOOL, short="a"))
    )
    with pytest.raises(ConfigurationError) as info:
        app.validate()
    assert info.value.message == "Flag curta duplicada encontrada: a"


def test_validate_required_with_default_in_subcommand():
    app = CLIApp("app", "1.0.0").add_command(
        Command("sub").add_flag(
            Flag(
                "mode",
                FlagType.STRING,
                required=True,
                default_value=FlagValue(FlagType.STRING, "x"),
            )
        )
    )
    with pytest.raises(ConfigurationError) as info:
        app.validate()
    assert "mode" in info.value.message


def test_run_help_prints_help(capsys):
    app = CLIApp("app", "1.0.0").add_command(
        Command("hello").add_flag(Flag("name", FlagType.STRING))
    )
    parsed = app.run(["hello", "--help"])
    out = capsys.readouterr().out
    assert parsed.help_requested is True
    assert "app v1.0.0" in out
    assert "app hello [OPÇÕES]" in out


def test_run_unknown_flag_reports_and_raises(capsys):
    app = CLIApp("app", "1.0.0")
    with pytest.raises(UnknownFlag) as info:
        app.run(["--bogus"])
    captured = capsys.readouterr()
    assert info.value == UnknownFlag("bogus")
    assert "Flag desconhecida: --bogus" in captured.err
    assert "Use --help para obter ajuda" in captured.out


def test_run_missing_required_has_no_hint(capsys):
    app = CLIApp("app", "1.0.0").add_global_flag(
        Flag("name", FlagType.STRING, required=True)
    )
    with pytest.raises(RequiredFlagNotProvided):
        app.run([])
    captured = capsys.readouterr()
    assert "Flag obrigatória não fornecida: --name" in captured.err
    assert "Use --help" not in captured.out


def test_run_from_env(monkeypatch):
    app = CLIApp("app", "1.0.0").add_global_flag(Flag("name", FlagType.STRING))
    monkeypatch.setattr(sys, "argv", ["prog", "--name", "Ana"])
    parsed = app.run_from_env()
    assert parsed.get_flag("name").as_string() == "Ana"


def test_get_info_lists_nested_commands():
    app = (
        CLIApp("app", "1.0.0")
        .add_command(Command("hello"))
        .add_command(Command("calc").add_subcommand(Command("add")))
    )
    assert app.get_info() == ["hello", "calc", "calc add"]


def test_app_info_display(capsys):
    info = AppInfo("app", "1.0.0", "desc", ["hello", "calc add"], 2)
    info.display()
    out = capsys.readouterr().out
    assert "app v1.0.0" in out
    assert "desc\n" in out
    assert "Comandos disponíveis: 2" in out
    assert "  - calc add" in out
    assert "Flags globais: 2" in out