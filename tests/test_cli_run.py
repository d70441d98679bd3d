import importlib
import sys

import pytest

from wallgen.emitter import emit_records, render_document
from wallgen.tiles import DEFAULT_TABLE

# wallgen.cli is imported as a module and driven through parse_args + main
# so output lands in capsys instead of a real terminal.


@pytest.fixture()
def run_module():
    # Clean import each time (the cli module reads VERSION once)
    if "wallgen.cli" in sys.modules:
        del sys.modules["wallgen.cli"]
    return importlib.import_module("wallgen.cli")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "Wall Prefab Generator" in out


def test_no_arguments_prints_builtin_table(run_module, capsys):
    assert run_module.main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == emit_records(DEFAULT_TABLE)
    assert len(captured.out.splitlines()) == 30
    # log line goes to stderr, never mixed into records
    assert "event=generate" in captured.err
    assert "records=30" in captured.err


def test_table_file_and_layout(run_module, capsys, table_file):
    path = table_file("0 0 1 1\n")
    assert run_module.main(["--table", path, "--layout", "pretty"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("(data: Some((\n  transform: Some((\n    translation: (16, 16, 0),")
    assert out.endswith(")),),\n")


def test_out_file_gets_document(run_module, capsys, tmp_path):
    out_path = tmp_path / "map.ron"
    assert run_module.main(["--document", "--out", str(out_path)]) == 0
    assert capsys.readouterr().out == ""
    assert out_path.read_text(encoding="utf-8") == render_document(DEFAULT_TABLE)


def test_env_file_argument(run_module, capsys, tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("WALLGEN_CELL_SIZE=16\n")
    monkeypatch.delenv("WALLGEN_CELL_SIZE", raising=False)
    assert run_module.main(["--env-file", str(env_file)]) == 0
    first = capsys.readouterr().out.splitlines()[0]
    # 0, 2, 5, 1 at 16 units per cell
    assert "translation: (40, 40, 0)" in first
    assert "width: 80,height: 16," in first


def test_cli_flag_beats_env(run_module, capsys, monkeypatch):
    monkeypatch.setenv("WALLGEN_LAYOUT", "pretty")
    assert run_module.main(["--layout", "compact"]) == 0
    assert capsys.readouterr().out == emit_records(DEFAULT_TABLE)


def test_malformed_table_exit_code(run_module, capsys, table_file):
    path = table_file("0 2 5 1\n0 3 1\n")
    assert run_module.main(["--table", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=table_invalid" in captured.err


def test_missing_table_file(run_module, capsys, tmp_path):
    assert run_module.main(["--table", str(tmp_path / "missing.txt")]) == 1
    assert "event=io_failed" in capsys.readouterr().err


def test_bad_cell_size_flag(run_module, capsys):
    assert run_module.main(["--cell-size", "7"]) == 1
    assert "event=config_invalid" in capsys.readouterr().err


def test_write_failure_is_reported(run_module, capsys, monkeypatch):
    import wallgen.generator as generator

    def broken_write(text, out_path=None, stream=None):
        raise BrokenPipeError("pipe closed")

    monkeypatch.setattr(generator, "write_output", broken_write)
    assert run_module.main([]) == 1
    assert "event=io_failed" in capsys.readouterr().err


def test_unknown_layout_is_usage_error(run_module):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--layout", "yaml"])
    assert exc.value.code == 2


def test_env_file_log_level_applies(run_module, capsys, tmp_path):
    env_file = tmp_path / "quiet.env"
    env_file.write_text("WALLGEN_LOG_LEVEL=error\n")
    assert run_module.main(["--env-file", str(env_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == emit_records(DEFAULT_TABLE)
    assert "event=generate" not in captured.err


def test_env_file_json_logging(run_module, capsys, tmp_path):
    env_file = tmp_path / "json.env"
    env_file.write_text("WALLGEN_LOG_JSON=1\n")
    assert run_module.main(["--env-file", str(env_file)]) == 0
    err = capsys.readouterr().err.strip()
    assert '"event":"generate"' in err
    assert '"records":30' in err


@pytest.mark.parametrize(
    "key,bad,flags",
    [
        ("WALLGEN_LAYOUT", "yaml", ["--layout", "compact"]),
        ("WALLGEN_CELL_SIZE", "7", ["--cell-size", "32"]),
        ("WALLGEN_CELL_SIZE", "big", ["--cell-size", "32"]),
    ],
)
def test_valid_flag_overrides_invalid_env(run_module, capsys, monkeypatch, key, bad, flags):
    monkeypatch.setenv(key, bad)
    assert run_module.main(flags) == 0
    captured = capsys.readouterr()
    assert captured.out == emit_records(DEFAULT_TABLE)
    assert "event=config_invalid" not in captured.err


def test_invalid_env_without_flag_still_rejected(run_module, capsys, monkeypatch):
    monkeypatch.setenv("WALLGEN_LAYOUT", "yaml")
    assert run_module.main([]) == 1
    assert "event=config_invalid" in capsys.readouterr().err


def test_non_utf8_table_is_reported(run_module, capsys, tmp_path):
    path = tmp_path / "walls.txt"
    path.write_bytes(b"0 2 5 1\n\xff\xfe 1 1 1\n")
    assert run_module.main(["--table", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=table_invalid" in captured.err
    assert "UTF-8" in captured.err


def test_checkout_shim_uses_cli_main(run_module):
    if "run" in sys.modules:
        del sys.modules["run"]
    shim = importlib.import_module("run")
    assert shim.main is sys.modules["wallgen.cli"].main
