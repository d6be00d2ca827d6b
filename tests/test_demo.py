"""Smoke test for the demo driver (in-process mode)."""

from sharesolve.demo import run_demo


def test_demo_prints_both_secrets(capsys, monkeypatch):
    monkeypatch.setattr(run_demo, "SERVICE_URL", "")
    assert run_demo.main() == 0
    out = capsys.readouterr().out
    assert "Secret: 3" in out
    assert "Secret: 79836264049851" in out
