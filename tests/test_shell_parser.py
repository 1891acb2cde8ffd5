from myshell.shell_parser import ParsedCommand, parse_line


def test_parse_line_splits_name_and_args():
    command = parse_line("echo hello world\n")
    assert command == ParsedCommand(name="echo", args=("hello", "world"))


def test_parse_line_keeps_empty_tokens_between_spaces():
    command = parse_line("echo a  b")
    assert command.name == "echo"
    assert command.args == ("a", "", "b")


def test_parse_line_trims_outer_whitespace():
    command = parse_line("   pwd   \n")
    assert command.name == "pwd"
    assert command.args == ()


def test_parse_line_blank_input_has_empty_name():
    command = parse_line("   \n")
    assert command.name == ""
    assert command.args == ()


def test_parse_line_does_not_interpret_quotes():
    command = parse_line("echo 'a b'")
    assert command.args == ("'a", "b'")
