import pytest

from circlecore.cli import main


def test_reports_version_and_success(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Version: 1.0.0" in out
    assert "Build system is working correctly!" in out


def test_next_steps_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    setup = out.index("./scripts/setup-dev.sh")
    build = out.index("./build.sh")
    qemu = out.index("./scripts/run-qemu.sh")
    assert setup < build < qemu


def test_unknown_argument_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "circleos-info" in capsys.readouterr().out