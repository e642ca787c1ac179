from mosuser.lexer import Token, TokenKind, tokenize


def kinds(tokens):
    return [token.kind for token in tokens]


def texts(tokens):
    return [token.text for token in tokens]


def test_empty_and_blank_lines():
    assert tokenize("") == []
    assert tokenize(" \t\r\n") == []


def test_words_split_on_whitespace():
    assert texts(tokenize("  echo   hello\tworld ")) == ["echo", "hello", "world"]
    assert all(kind is TokenKind.WORD for kind in kinds(tokenize("a b c")))


def test_pipe_and_redirections():
    tokens = tokenize("cat < in | sort > out")
    assert kinds(tokens) == [
        TokenKind.WORD,
        TokenKind.REDIRECT_IN,
        TokenKind.WORD,
        TokenKind.PIPE,
        TokenKind.WORD,
        TokenKind.REDIRECT_OUT,
        TokenKind.WORD,
    ]
    assert texts(tokens) == ["cat", "<", "in", "|", "sort", ">", "out"]


def test_symbols_end_words_without_spaces():
    assert texts(tokenize("ls;pwd")) == ["ls", ";", "pwd"]


def test_double_symbols():
    tokens = tokenize("a >> f && b || c")
    assert kinds(tokens) == [
        TokenKind.WORD,
        TokenKind.APPEND,
        TokenKind.WORD,
        TokenKind.AND,
        TokenKind.WORD,
        TokenKind.OR,
        TokenKind.WORD,
    ]


def test_single_ampersand_and_parentheses():
    assert kinds(tokenize("(a)&")) == [
        TokenKind.LPAREN,
        TokenKind.WORD,
        TokenKind.RPAREN,
        TokenKind.BACKGROUND,
    ]


def test_kind_values_match_token_codes():
    assert tokenize("word")[0].kind.value == "w"
    assert tokenize(">>")[0].kind.value == "a"


def test_variable_substitution():
    tokens = tokenize("echo $name", {"name": "world"})
    assert tokens == [Token(TokenKind.WORD, "echo"), Token(TokenKind.WORD, "world")]


def test_unset_variable_is_empty():
    assert texts(tokenize("echo $missing x")) == ["echo", "", "x"]


def test_variable_word_runs_to_whitespace():
    tokens = tokenize("$v;ls next", {"v": "a"})
    assert texts(tokens) == ["a;ls", "next"]
    assert kinds(tokens) == [TokenKind.WORD, TokenKind.WORD]


def test_variable_value_with_spaces_is_one_word():
    assert texts(tokenize("$v", {"v": "x y"})) == ["x y"]


def test_variable_name_stops_at_non_name_char():
    assert texts(tokenize("$a.txt", {"a": "file"})) == ["file.txt"]