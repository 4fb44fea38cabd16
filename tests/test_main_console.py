import main


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_prints_result_and_json(monkeypatch, capsys):
    _feed(monkeypatch, ["화이팅, 할 수 있어!", "exit"])

    main.run_text_mode()

    out = capsys.readouterr().out
    assert "[판별] 응원글" in out
    assert '"method": "heuristic"' in out
    assert "종료합니다." in out


def test_console_reports_empty_input_and_stops_on_eof(monkeypatch, capsys):
    _feed(monkeypatch, ["   "])

    main.run_text_mode()

    out = capsys.readouterr().out
    assert "[입력 오류] 텍스트가 필요합니다." in out
    assert "종료합니다." in out
