import pytest

import ghostpath.config as config_module
import main
from main import parse_args


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    plain_config = tmp_path / "plain.toml"
    plain_config.write_text("[ui]\nrich = false\n", encoding="utf-8")
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATHS", [str(tmp_path / "none.toml")])
    monkeypatch.setenv("GHOSTPATH_CONFIG", str(plain_config))
    monkeypatch.delenv("GHOSTPATH_TRACE", raising=False)
    monkeypatch.chdir(tmp_path)


def test_parse_args_defaults():
    args = parse_args(["tar"])
    assert args.text == "tar"
    assert args.keys == ""
    assert args.submit is False


def test_main_replays_keys_and_submits(tmp_path, capsys):
    (tmp_path / "work" / "target").mkdir(parents=True)

    exit_code = main.main(["tar", "--keys", "right", "--cwd", str(tmp_path / "work"), "--submit"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.strip() == str((tmp_path / "work" / "target").resolve())
    assert "target/" in captured.err


def test_main_renders_ghost_without_submit(tmp_path, capsys):
    (tmp_path / "srcfoo").mkdir()

    exit_code = main.main(["--keys", "s,r"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == ""
    assert "srcfoo/" in captured.err


def test_main_failed_submit_returns_error(capsys):
    exit_code = main.main(["missing", "--submit"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Not a directory: missing" in captured.err


def test_main_rejects_bad_keys(capsys):
    assert main.main(["--keys", "hyper+x"]) == 2
    assert "Key error" in capsys.readouterr().err


def test_main_reports_missing_config(tmp_path, capsys):
    assert main.main(["--config", str(tmp_path / "nope.toml")]) == 1
    assert "Config error" in capsys.readouterr().err


def test_main_version(capsys):
    assert main.main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("ghostpath ")


def test_main_initializes_default_config_when_none_found(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("GHOSTPATH_CONFIG")
    default_config = tmp_path / "none.toml"
    assert not default_config.exists()

    assert main.main(["--version"]) == 0
    assert not default_config.exists()

    assert main.main([]) == 0

    assert default_config.is_file()
    assert "[completion]" in default_config.read_text(encoding="utf-8")
    assert f"Initialized default config at {default_config.resolve()}" in capsys.readouterr().err


def test_main_replays_named_keys(tmp_path, capsys):
    (tmp_path / "work" / "target").mkdir(parents=True)

    exit_code = main.main(["--cwd", str(tmp_path / "work"), "--keys", "t,a,r,right,c-left,C-A,end", "--submit"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.strip() == str((tmp_path / "work" / "target").resolve())
