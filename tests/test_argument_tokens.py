from argv_utils.argument_tokens import ArgumentToken, is_name, to_alias


def test_is_name():
    assert is_name("arg1") is True
    assert is_name("arg_1-x") is True
    assert is_name("-x") is True
    assert is_name("ABC123") is True
    assert is_name("") is False
    assert is_name("bad name") is False
    assert is_name("bad!") is False
    assert is_name("a=b") is False
    assert is_name("café") is False
    assert is_name(None) is False


def test_to_alias():
    assert to_alias("arg1") == "--arg1"


def test_argument_token_a():
    token = ArgumentToken("--verbose")
    assert token == "--verbose"
    assert token.valid is True
    assert token.name == "verbose"
    assert token.alias == "--verbose"
    assert token.value is None
    assert token.has_value is False


def test_argument_token_b():
    token = ArgumentToken("--arg1=123")
    assert token.valid is True
    assert token.name == "arg1"
    assert token.alias == "--arg1"
    assert token.value == "123"
    assert token.has_value is True


def test_argument_token_bad_format():
    for value in ["foo", "-x", "--", "--=abc", "--bad name", "--a=", "--a=b=c", "--a=b c", "--a!", " --a", ""]:
        token = ArgumentToken(value)
        assert token.valid is False, value
        assert token.name is None
        assert token.alias is None
        assert token.value is None


def test_argument_token_mistyped():
    for value, text in [(None, "None"), (123, "123"), (["--a"], "['--a']")]:
        token = ArgumentToken(value)
        assert token == text
        assert token.valid is False
        assert token.name is None
        assert token.value is None
