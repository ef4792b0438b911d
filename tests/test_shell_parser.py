import pytest

from myshell.exceptions import RedirectionError
from myshell.shell_parser import (
    REDIRECTION_OPERATORS,
    Redirection,
    RedirectMode,
    Stream,
    extract_redirection,
    parse_command,
    tokenize,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", []),
        ("   ", []),
        ("echo hi", ["echo", "hi"]),
        ("  echo hi  ", ["echo", "hi"]),
        ("echo   a    b", ["echo", "a", "b"]),
        ("echo 'a b' c", ["echo", "a b", "c"]),
        ("echo 'hello    world'", ["echo", "hello    world"]),
        ('echo "hello    world"', ["echo", "hello    world"]),
        ("echo a''b", ["echo", "ab"]),
        ("echo ''", ["echo"]),
        ("echo \"a\"'b'c", ["echo", "abc"]),
        ("echo 'say \"hi\"'", ["echo", 'say "hi"']),
        ('echo "it\'s"', ["echo", "it's"]),
        ("a\tb", ["a\tb"]),
    ],
)
def test_tokenize_quotes_and_spaces(line, expected):
    assert tokenize(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("echo a\\ b", ["echo", "a b"]),
        ("echo \\'x\\'", ["echo", "'x'"]),
        ('echo \\"x\\"', ["echo", '"x"']),
        ("echo \\n", ["echo", "n"]),
        ("echo \\\\", ["echo", "\\"]),
        ("echo 'a\\b'", ["echo", "a\\b"]),
        ("echo 'a\\'", ["echo", "a\\"]),
        ('echo "a\\b"', ["echo", "a\\b"]),
        ('echo "a\\\\b"', ["echo", "a\\b"]),
        ('echo "\\$HOME"', ["echo", "$HOME"]),
        ('echo "it\\"s"', ["echo", 'it"s']),
        ('echo "a\\\nb"', ["echo", "a\nb"]),
        ('echo "a\\\'b"', ["echo", "a\\'b"]),
    ],
)
def test_tokenize_backslash_escapes(line, expected):
    assert tokenize(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("echo trailing\\", ["echo", "trailing\\"]),
        ('echo "x\\', ["echo", "x\\"]),
        ("echo 'unterminated here", ["echo", "unterminated here"]),
        ('echo "open', ["echo", "open"]),
        ("echo 'it''s", ["echo", "its"]),
    ],
)
def test_tokenize_is_permissive_about_unterminated_input(line, expected):
    assert tokenize(line) == expected


@pytest.mark.parametrize(
    "words",
    [
        ["echo", "plain"],
        ["cat", "/tmp/file name", "other"],
        ["printf", "  padded  ", "x"],
        ["say", "it's", "fine"],
    ],
)
def test_quoted_words_reconstruct_original_content(words):
    quoted = []
    for idx, word in enumerate(words):
        if "'" in word:
            quoted.append(f'"{word}"')
        elif idx % 2:
            quoted.append(f"'{word}'")
        else:
            quoted.append(f'"{word}"')
    assert " ".join(tokenize(" ".join(quoted))) == " ".join(words)


def test_extract_redirection_stdout_truncate():
    clean, redirect = extract_redirection(["echo", "hi", ">", "out.txt"])
    assert clean == ["echo", "hi"]
    assert redirect == Redirection(stream=Stream.STDOUT, mode=RedirectMode.TRUNCATE, path="out.txt")


@pytest.mark.parametrize(
    ("operator", "stream", "mode"),
    [
        (">", Stream.STDOUT, RedirectMode.TRUNCATE),
        ("1>", Stream.STDOUT, RedirectMode.TRUNCATE),
        ("2>", Stream.STDERR, RedirectMode.TRUNCATE),
        (">>", Stream.STDOUT, RedirectMode.APPEND),
        ("1>>", Stream.STDOUT, RedirectMode.APPEND),
        ("2>>", Stream.STDERR, RedirectMode.APPEND),
    ],
)
def test_extract_redirection_operators(operator, stream, mode):
    clean, redirect = extract_redirection(["ls", "-l", operator, "log.txt", "extra"])
    assert clean == ["ls", "-l", "extra"]
    assert redirect is not None
    assert redirect.stream is stream
    assert redirect.mode is mode
    assert redirect.path == "log.txt"


def test_operator_table_order():
    assert [op for op, _, _ in REDIRECTION_OPERATORS] == [">", "1>", "2>", ">>", "1>>", "2>>"]


def test_extract_redirection_applies_only_highest_priority_operator():
    clean, redirect = extract_redirection(["cmd", "2>", "err.txt", ">", "out.txt"])
    assert clean == ["cmd", "2>", "err.txt"]
    assert redirect == Redirection(Stream.STDOUT, RedirectMode.TRUNCATE, "out.txt")

    clean, redirect = extract_redirection(["cmd", ">>", "a.txt", "1>", "b.txt"])
    assert clean == ["cmd", ">>", "a.txt"]
    assert redirect.path == "b.txt"


def test_extract_redirection_trims_target():
    _, redirect = extract_redirection(["echo", ">", "  spaced.txt "])
    assert redirect.path == "spaced.txt"


def test_extract_redirection_without_operator():
    tokens = ["echo", "a>b", "2>&1x"]
    clean, redirect = extract_redirection(tokens)
    assert clean == tokens
    assert clean is not tokens
    assert redirect is None


def test_extract_redirection_missing_target():
    with pytest.raises(RedirectionError):
        extract_redirection(["echo", "hi", "2>>"])


def test_parse_command_splits_name_args_and_redirect():
    command = parse_command("echo 'hello world' 1>> log.txt\n")
    assert command.name == "echo"
    assert command.args == ["hello world"]
    assert command.redirect == Redirection(Stream.STDOUT, RedirectMode.APPEND, "log.txt")


def test_parse_command_empty_line():
    command = parse_command("")
    assert command.name == ""
    assert command.args == []
    assert command.redirect is None


def test_parse_command_name_is_never_an_operator():
    command = parse_command("> out.txt echo hi")
    assert command.name == "echo"
    assert command.args == ["hi"]
    assert command.redirect.path == "out.txt"
