from ferias_plr import cli


def responder(monkeypatch, respostas):
    it = iter(respostas)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


def test_cli_prints_breakdown(monkeypatch, capsys):
    responder(monkeypatch, ["R$ 5.000,00", "20", "10", "s", "s", "100"])
    assert cli.main() == 0

    out = capsys.readouterr().out
    assert "Abono pecuniário" in out
    assert "R$ 2.500,00" in out           # 1ª parcela do 13º
    assert "R$ 14.166,67" in out          # total bruto
    assert "R$ 13.487,63" in out          # líquido


def test_cli_uses_defaults_on_empty_answers(monkeypatch, capsys):
    responder(monkeypatch, ["", "", "", "n", "n"])
    assert cli.main() == 0

    out = capsys.readouterr().out
    assert "Adiantamento 13º" not in out
    assert "--- PLR ---" not in out


def test_cli_lists_every_error(monkeypatch, capsys):
    responder(monkeypatch, ["1000", "10", "5", "n", "n"])
    assert cli.main() == 1

    out = capsys.readouterr().out
    assert "Salário bruto:" in out
    assert "Dias de férias:" in out


def test_cli_cancel(monkeypatch):
    def interromper(_prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", interromper)
    assert cli.main() == 130
