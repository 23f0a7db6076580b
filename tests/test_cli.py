"""
Tests for the dirliner command-line interface
"""

import pytest

from dirliner import __version__
from dirliner.cli import ConsoleLogger, format_size, main, split_patterns


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1 MB"),
        (5 * 1024 ** 3, "5 GB"),
        (2048 * 1024 ** 4, "2048 TB"),
    ],
)
def test_format_size(num_bytes, expected):
    assert format_size(num_bytes) == expected


def test_split_patterns():
    assert split_patterns("node_modules, *.log,,  ") == ["node_modules", "*.log"]
    assert split_patterns("") == []


def test_main_flattens_and_prints_summary(make_tree, tmp_path, monkeypatch, capsys):
    source = make_tree({"a.txt": "a", "nested/b.txt": "b", "debug.log": "x"})
    target = tmp_path / "out"
    monkeypatch.chdir(tmp_path)

    main(["-s", str(source), "-t", str(target), "-i", "*.log"])

    out = capsys.readouterr().out
    assert "DirLiner" in out
    assert "Files Processed:" in out
    assert "Files Ignored:" in out
    assert "Processing completed successfully!" in out
    assert sorted(p.name for p in target.iterdir()) == ["a.txt", "nested-b.txt"]


def test_main_verbose_logs_progress(make_tree, tmp_path, monkeypatch, capsys):
    source = make_tree({"a.txt": "a"})
    monkeypatch.chdir(tmp_path)

    main(["-s", str(source), "-t", str(tmp_path / "out"), "-v"])

    out = capsys.readouterr().out
    assert "Configuration:" in out
    assert "Copied" in out
    assert "Processing directory" in out


def test_main_quiet_has_no_progress_lines(make_tree, tmp_path, monkeypatch, capsys):
    source = make_tree({"a.txt": "a"})
    monkeypatch.chdir(tmp_path)

    main(["-s", str(source), "-t", str(tmp_path / "out")])

    out = capsys.readouterr().out
    assert "Copied" not in out
    assert "Configuration:" not in out


def test_main_uses_custom_ignore_file(make_tree, tmp_path, monkeypatch):
    source = make_tree({"a.txt": "a", "secret/key.pem": "k"})
    ignore_file = tmp_path / ".customignore"
    ignore_file.write_text("secret/\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    main(["-s", str(source), "-t", str(tmp_path / "out"), "--ignore-file", str(ignore_file)])

    assert [p.name for p in (tmp_path / "out").iterdir()] == ["a.txt"]


def test_main_missing_source_exits_with_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as exc:
        main(["-s", str(tmp_path / "missing"), "-t", str(tmp_path / "out")])

    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "does not exist" in err
    assert "Traceback" not in err


def test_main_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_console_logger_writes_symbols(capsys):
    logger = ConsoleLogger()
    logger.info("hello")
    logger.warning("careful")
    logger.error("broken")

    out = capsys.readouterr().out
    assert "ℹ hello" in out
    assert "⚠ careful" in out
    assert "✖ broken" in out


def test_module_import_does_not_run_cli(capsys):
    import importlib

    importlib.import_module("dirliner.__main__")

    assert "DirLiner" not in capsys.readouterr().out


def test_verbose_configuration_printed_once(make_tree, tmp_path, monkeypatch, capsys):
    source = make_tree({"a.txt": "a"})
    monkeypatch.chdir(tmp_path)

    main(["-s", str(source), "-t", str(tmp_path / "out"), "-v", "-i", "*.log"])

    out = capsys.readouterr().out
    assert out.count("Source:") == 1
    assert out.count("Ignore Patterns:") == 1
