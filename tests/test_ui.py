import re

from cliparser.command import Command, PositionalArg
from cliparser.errors import UnknownFlag
from cliparser.flag import Flag, FlagType, FlagValue
from cliparser.ui import (
    format_help,
    format_usage,
    show_error,
    show_help,
    show_info,
    show_success,
    show_warning,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return _ANSI.sub("", text)


def test_format_help_basic():
    help_text = plain(format_help("myapp", "1.0.0", "Uma descrição de testes", Command("test")))
    assert "myapp v1.0.0" in help_text
    assert "Uma descrição de testes" in help_text
    assert "USO" in help_text


def test_format_help_without_description_or_options():
    help_text = plain(format_help("myapp", "1.0.0", "", Command("myapp")))
    assert help_text.startswith("myapp v1.0.0\n\nUSO\n    myapp\n\n")
    assert "OPÇÕES:" not in help_text
    assert "ARGUMENTOS" not in help_text


def test_format_help_is_coloured():
    help_text = format_help("myapp", "1.0.0", "", Command("myapp"))
    assert "\x1b[" in help_text
    assert plain(help_text) != help_text


def test_usage_root_only():
    assert format_usage("app", Command("app")) == "app"


def test_usage_full():
    command = (
        Command("sub")
        .add_subcommand(Command("inner"))
        .add_flag(Flag("name", FlagType.STRING))
        .add_positional_arg(PositionalArg("file"))
        .add_positional_arg(PositionalArg("out", required=False))
    )
    assert format_usage("app", command) == "app sub <SUBCOMANDO> [OPÇÕES] <file> [out]"


def test_help_lists_flags_sorted():
    command = (
        Command("app")
        .add_flag(Flag("zeta", FlagType.BOOL))
        .add_flag(Flag("alpha", FlagType.STRING, short="a", required=True))
    )
    help_text = plain(format_help("app", "1.0", "", command))
    assert "OPÇÕES:" in help_text
    assert help_text.index("--alpha") < help_text.index("--zeta")
    assert "-a  --alpha<string>" in help_text
    assert "--zeta\n" in help_text
    assert "--zeta<" not in help_text


def test_help_shows_possible_and_default_values():
    flag = Flag(
        "greeting",
        FlagType.STRING,
        possible_values=["oi", "olá"],
        default_value=FlagValue(FlagType.STRING, "olá"),
    )
    help_text = plain(format_help("app", "1.0", "", Command("app").add_flag(flag)))
    assert "Valores possíveis: oi, olá" in help_text
    assert 'Padrão: String("olá")' in help_text
    assert "(opcional)" in help_text


def test_help_default_of_list_and_integer():
    command = (
        Command("app")
        .add_flag(Flag("ids", FlagType.INTEGER_LIST, default_value=FlagValue(FlagType.INTEGER_LIST, [1, 2])))
        .add_flag(Flag("times", FlagType.INTEGER, default_value=FlagValue(FlagType.INTEGER, 1)))
    )
    help_text = plain(format_help("app", "1.0", "", command))
    assert "Padrão: IntegerList([1, 2])" in help_text
    assert "Padrão: Integer(1)" in help_text


def test_help_lists_positional_args():
    command = Command("app").add_positional_arg(
        PositionalArg("out", description="destino", required=False)
    )
    help_text = plain(format_help("app", "1.0", "", command))
    assert "ARGUMENTOS" in help_text
    assert "out (opcional)\ndestino" in help_text


def test_show_help_prints(capsys):
    show_help("myapp", "2.0", "desc", Command("myapp"))
    out = plain(capsys.readouterr().out)
    assert "myapp v2.0" in out
    assert "desc" in out


def test_show_error_goes_to_stderr(capsys):
    show_error(UnknownFlag("x"))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert plain(captured.err) == "[ERROR] Flag desconhecida: --x\n"


def test_show_success(capsys):
    show_success("feito")
    assert plain(capsys.readouterr().out) == "[SUCCESS], feito\n"


def test_show_warning(capsys):
    show_warning("cuidado")
    assert plain(capsys.readouterr().out) == "[WARNING], cuidado\n"


def test_show_info(capsys):
    show_info("Use --help para obter ajuda")
    out = capsys.readouterr().out
    assert plain(out) == "[INFO], Use --help para obter ajuda\n"
    assert "\x1b[34m" in out