import logging

import regression_checks


def test_main_silences_expected_error_logs(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(regression_checks, "run_regressions", lambda: calls.append("run"))

    regression_checks.main()

    assert calls == [{"level": logging.CRITICAL}, "run"]


def test_regressions_pass(capsys):
    regression_checks.run_regressions()
    assert "All regression checks passed." in capsys.readouterr().out
