import io

from hostdetail.util.log import colorize, log, log_error, log_info, log_warn


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_log_info_prints_message(capsys, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    log_info("[HOSTS] hello")

    assert capsys.readouterr().out == "[HOSTS] hello\n"


def test_log_error_goes_to_stderr(capsys):
    log_error("[HTTP] boom")
    captured = capsys.readouterr()

    assert captured.out == ""
    assert "[HTTP] boom" in captured.err


def test_log_level_filters_lower_levels(capsys, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARN")
    log_info("quiet")
    log_warn("loud")

    assert capsys.readouterr().out == "loud\n"


def test_colorize_on_tty(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    colored = colorize("msg", "SUCCESS", FakeTTY())

    assert colored == "\033[32mmsg\033[0m"


def test_no_color_disables_ansi(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")

    assert colorize("msg", "ERROR", FakeTTY()) == "msg"


def test_log_writes_to_given_stream(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    stream = io.StringIO()
    log("[GAUGE] tick", "DEBUG", stream=stream)

    assert stream.getvalue() == "[GAUGE] tick\n"
