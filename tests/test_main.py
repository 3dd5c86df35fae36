from pawtools.main import main


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "paw-cli is the CLI application for Paw" in capsys.readouterr().out


def test_unknown_command_prints_usage(capsys):
    assert main(["bogus"]) == 1
    assert "The commands are:" in capsys.readouterr().out


def test_version_command(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.startswith("paw-cli version ")


def test_version_help(capsys):
    assert main(["version", "-h"]) == 0
    assert capsys.readouterr().out.startswith("Usage: paw-cli version")


def test_bad_flag_reports_error(capsys):
    assert main(["version", "-zzz"]) == 1
    assert capsys.readouterr().err.startswith("[✗] flag provided but not defined")