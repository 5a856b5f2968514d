"""Tests for the syntaxtour CLI."""

from syntaxtour import DEFAULT_NAME, main


def test_main_runs_all_sections(capsys):
    """Default run constructs the example and prints every section."""
    result = main([])
    out = capsys.readouterr().out

    assert result == 0
    assert f"My name is {DEFAULT_NAME}, it has 12 characters." in out
    assert f"{DEFAULT_NAME} is pretty long" in out
    assert "sum is 15" in out
    assert f"name member of the outer class is {DEFAULT_NAME}" in out


def test_main_custom_name(capsys):
    result = main(["--name", "kotlin"])
    out = capsys.readouterr().out

    assert result == 0
    assert "Do you still recognize my name NILTOK?" in out
    assert "kotlin starts with lower case" in out


def test_main_single_section(capsys):
    result = main(["--name", "kotlin", "--section", "nullable"])
    out = capsys.readouterr().out

    assert result == 0
    assert "this is the second constructor" in out
    assert "sum is 15" in out
    assert "input is in 1,2,3" not in out
    assert "hello from the inner class" not in out


def test_main_list(capsys):
    """--list prints sections without building an example."""
    result = main(["--list"])
    out = capsys.readouterr().out

    assert result == 0
    assert "control-flow" in out
    assert "create-class" in out
    assert "welcomeMsg" not in out


def test_main_empty_name(capsys):
    result = main(["--name", ""])
    captured = capsys.readouterr()

    assert result == 1
    assert "Error" in captured.err
    assert captured.out == ""
