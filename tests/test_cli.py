import importlib
import sys

import pytest

# run.py is imported as a module; start_server is patched so no socket is opened.


@pytest.fixture()
def run_module():
    # Fresh import each time because run.py reads VERSION once
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "mazegen" in out


def test_default_command_is_server(run_module):
    ns = run_module.parse_args([])
    assert ns.command == "server"


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setenv("HOST", "127.0.0.1")
    import mazegen.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    assert run_module.main(["server"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": False}


def test_server_main_debug_flag(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls["debug"] = debug

    import mazegen.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    run_module.main(["server", "--debug", "--port", "6010"])
    assert calls["debug"] is True


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / ".env"
    env_file.write_text("HOST=10.1.2.3\nPORT=6001\n")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port)

    import mazegen.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    run_module.main(["--env-file", str(env_file), "server"])
    # load_dotenv leaves these in os.environ; drop them again
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    assert calls == {"host": "10.1.2.3", "port": 6001}


def test_render_prints_maze(run_module, capsys):
    code = run_module.main(["render", "--width", "6", "--height", "4", "--rooms", "1", "--seed", "3", "--path"])
    assert code == 0
    out = capsys.readouterr().out
    assert "S" in out and "E" in out
    assert "seed=3 size=6x4" in out
    grid_lines = [line for line in out.splitlines() if line and line[0] in "+|"]
    assert len(grid_lines) == 2 * 4 + 1


def test_render_rejects_bad_size(run_module, capsys):
    code = run_module.main(["render", "--width", "2", "--seed", "1"])
    assert code == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_render_rejects_unknown_bias(run_module):
    with pytest.raises(SystemExit):
        run_module.parse_args(["render", "--bias", "diagonal"])
