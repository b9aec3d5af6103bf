from inpututil import get_input, choose_option


def feed(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_get_input_retries_until_valid(monkeypatch, capsys):
    feed(monkeypatch, "abc", "12", " 3 ")
    assert get_input("> ", int, range(5)) == 3
    out = capsys.readouterr().out
    assert "must be of type int" in out
    assert "must be one of" in out


def test_get_input_bool(monkeypatch):
    feed(monkeypatch, "yes", "false")
    assert get_input("> ", bool) is False


def test_choose_option(monkeypatch, capsys):
    feed(monkeypatch, "x", "c")
    assert choose_option({"p": "Print secret", "c": "Copy secret"}) == "c"
    assert "[p] Print secret" in capsys.readouterr().out
