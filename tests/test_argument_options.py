from argv_utils.argument_options import ArgumentOption, ArgumentOptions


def test_argument_option_a():
    option = ArgumentOption("verbose", "Verbose output.")
    assert option.name == "verbose"
    assert option.alias == "--verbose"
    assert option.usage_alias == "--verbose"
    assert option.help == "Verbose output."
    assert option.choices == ()
    assert option.value == ""
    assert option.active is False
    assert option.accepts_value is False
    assert option.accepts(None) is True
    assert option.accepts("abc") is False


def test_argument_option_b():
    option = ArgumentOption("output", choices=[""])
    assert option.help == ""
    assert option.usage_alias == "--output=v"
    assert option.free_form is True
    assert option.restricted is False
    assert option.valid_choices is True
    assert option.accepts("file") is True
    assert option.accepts(None) is False
    assert option.accepts("") is False


def test_argument_option_c():
    option = ArgumentOption("format", choices=["json", "yaml"])
    assert option.choices == ("json", "yaml")
    assert option.free_form is False
    assert option.restricted is True
    assert option.valid_choices is True
    assert option.accepts("json") is True
    assert option.accepts("xml") is False
    assert option.accepts(None) is False


def test_argument_option_bad_choices():
    assert ArgumentOption("a", choices=["x"]).valid_choices is False
    assert ArgumentOption("a", choices=["x", ""]).valid_choices is False
    assert ArgumentOption("a", choices=["", ""]).valid_choices is False
    assert ArgumentOption("a", choices=[]).valid_choices is True


def test_argument_options_a():
    options = ArgumentOptions()
    options.declare("arg1", choices=[""])
    options.declare("arg2")
    assert len(options) == 2
    assert "arg1" in options
    assert "arg3" not in options
    assert [option.name for option in options] == ["arg1", "arg2"]
    assert options.find_by_alias("--arg2") is options.find("arg2")
    assert options.find_by_alias("arg2") is None
    assert options.has("arg1") is False
    assert options.get("arg1") == ""
    options.commit({"arg1": "123"})
    assert options.has("arg1") is True
    assert options.get("arg1") == "123"
    assert options.has("arg2") is False
    assert options.values == {"arg1": "123"}
    options.commit({"arg2": ""})
    assert options.has("arg1") is False
    assert options.get("arg1") == ""
    assert options.has("arg2") is True
    assert options.has("nope") is False
    assert options.get("nope") == ""


def test_argument_options_checks():
    options = ArgumentOptions()
    options.declare("good")
    options.declare("bad name!")
    options.declare("")
    options.declare("good", "again")
    options.declare("one", choices=["x"])
    options.declare("mixed", choices=["x", ""])
    assert options.check_names() == ["--bad name!", "--"]
    assert options.check_duplicate_names() == ["--good"]
    assert options.find("good").help == ""
    assert options.check_choices() == ["--one=v", "--mixed=v [x,]"]


def test_argument_option_mistyped_choices():
    option = ArgumentOption("mode", choices=["a", "b", None])
    assert option.choices == ("a", "b")
    assert option.valid_choices is False
    assert ArgumentOption("mode", choices=[None]).valid_choices is False
    options = ArgumentOptions()
    options.declare("mode", choices=["a", 1])
    options.declare("single", choices=[None])
    assert options.check_choices() == ["--mode=v [a,1]", "--single=v [None]"]
