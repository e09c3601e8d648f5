from rustdrill.ui import success, warn


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = warn("Ran exercises/x.rs with errors")
    assert line == "! Ran exercises/x.rs with errors"
    assert capsys.readouterr().out.strip() == line


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = success("Successfully ran exercises/x.rs")
    assert line == "✓ Successfully ran exercises/x.rs"
    assert line in capsys.readouterr().out


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = warn("boom")
    assert line.startswith("⚠️")
    assert line.endswith(" boom")
    assert "boom" in capsys.readouterr().out


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = success("done")
    assert line == "✅ done"
    assert capsys.readouterr().out.strip() == "✅ done"


def test_markup_is_printed_literally(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("[bold]text[/bold]")
    assert "[bold]text[/bold]" in capsys.readouterr().out