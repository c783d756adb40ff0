# cliparser

A small library for building command-line interfaces. An application
(`cliparser.cli.CLIApp`) holds a tree of commands and subcommands
(`cliparser.command.Command`), each with typed flags
(`cliparser.flag.Flag`) and positional arguments
(`cliparser.command.PositionalArg`). Parsing turns a list of words into a
`cliparser.parser.ParsedArgs`; problems are raised as subclasses of
`cliparser.errors.CliError`. Help screens and status messages are printed
with ANSI colour codes.

It has no dependencies outside the standard library.

## Defining an application

```python
from cliparser.cli import CLIApp
from cliparser.command import Command
from cliparser.flag import Flag, FlagType

app = CLIApp("greeter", "1.0.0")

hello = Command("hello")
hello.add_flag(Flag("name", FlagType.STRING, short="n", required=True))
app.add_command(hello)

parsed = app.parse(["hello", "--name", "Ana"])
print(parsed.subcommand)                    # hello
print(parsed.get_flag("name").as_string())  # Ana
```

`Command.add_flag`, `Command.add_subcommand`, `Command.add_positional_arg`,
`CLIApp.add_command` and `CLIApp.add_global_flag` return their object, so
calls can be chained. Adding a flag or subcommand with a name already in use
replaces the earlier one.

## Flag types

`FlagType` has `BOOL`, `STRING`, `INTEGER`, `FLOAT`, `STRING_LIST` and
`INTEGER_LIST`. A parsed value is a `FlagValue` holding its `kind` and
`value`; `as_string()`, `as_bool()`, `as_integer()`, `as_float()`,
`as_string_list()` and `as_integer_list()` return the value when the kind
matches and `None` otherwise. Integers must fit in a signed 64-bit range.
String values (and string-list values given through `Flag.parse_values`)
are checked against `possible_values` when it is set.

## What the parser understands

- `--name value` and `-n value` for flags that take a value.
- `--verbose` and `-v` for boolean flags, which become `True`.
- List flags take one value per occurrence and collect them when repeated:
  `--ids 1 --ids 2`.
- `--help` or `-h` stops parsing and sets `help_requested`; so does an
  empty command line for a command with `show_help_on_empty=True`.
- A word that names a subcommand hands the rest of the line to that
  subcommand; its flags and positional arguments are merged into the result
  and `subcommand` is set to its name. Any other word is a positional
  argument.
- Too few or too many positional arguments raise `NotEnoughArguments` or
  `TooManyArguments`.
- Flags that were not given take their default value; a required flag that
  is missing raises `RequiredFlagNotProvided`. An unknown flag raises
  `UnknownFlag`, a value-taking flag at the end of the line raises
  `FlagValueMissing`, and a bad value raises `InvalidFlagValue`.

`ParsedArgs` offers `get_flag(name)`, `has_flag(name)` and `get_arg(index)`.

## Running an application

`CLIApp.run(args)` parses, prints the help screen when it was asked for, and
prints errors in colour on standard error before raising them again.
`CLIApp.run_from_env()` does the same with the program's own command-line
arguments. `CLIApp.validate()` raises `ConfigurationError` for conflicts
such as repeated short names or a flag that is both required and has a
default. `CLIApp.get_info()` lists the full names of all commands, such as
`"calc add"`.

`cliparser.ui` provides `show_success`, `show_warning`, `show_info`,
`show_error` and `show_help`, plus `format_help` and `format_usage`, which
return the help text and usage line as strings.

## Example program

The package ships with a small demonstration (`cliparser.example`) with a
`hello` command and a `calc` command that has `add` and `multiply`
subcommands:

```
cliparser-example --help
cliparser-example hello --name Ana --times 2 --greeting hello
cliparser-example calc add --numbers 1 --numbers 2 --numbers 3
```

The `calc` commands parse and validate their numbers, but the handler looks
the operation up in `ParsedArgs.command`, which holds the application's name
after parsing, so they print nothing.

## What it does not do

- `--name=value` is not understood; the value must be the next word.
- Short flags cannot be bundled (`-abc`), and `-n` only works as a word of
  exactly two characters.
- Colour codes are always written, whether or not the output is a terminal.
- `cliparser.argument` (`Argument`, `ArgType`) only describes arguments; the
  parser does not use it.