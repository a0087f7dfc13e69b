import pytest

from bin2bmp.cli import main


def test_roundtrip(make_file, capsys):
    path, data = make_file(900, name="data.bin")
    assert main([str(path), "-v"]) == 0
    bmp = path.with_name("data.bin.bmp")
    assert bmp.exists() and not path.exists()

    assert main([str(bmp), "--info"]) == 0
    out = capsys.readouterr().out
    assert "original 900 bytes" in out
    assert "digest none" not in out

    assert main([str(bmp), "--verify"]) == 0
    assert "Verification succeeded." in capsys.readouterr().out
    assert path.read_bytes() == data


def test_no_rename(make_file):
    path, data = make_file(data=b"hello")
    assert main([str(path), "--no-rename"]) == 0
    assert path.read_bytes()[:2] == b"BM"


def test_missing_path(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope")])
    assert exc.value.code == 2


def test_conversion_error(make_file):
    path, data = make_file(data=bytes(300), name="broken.bmp")
    assert main([str(path)]) == 1
    assert path.read_bytes() == data


def test_unknown_log_level_falls_back(make_file, monkeypatch):
    import logging
    from bin2bmp import cli
    monkeypatch.setattr(cli, "LOG_LEVEL", "VERBOSE")
    path, _ = make_file(data=b"hello")
    assert main([str(path)]) == 0
    assert cli.logger.level == logging.WARNING
    assert path.with_name(path.name + ".bmp").exists()
