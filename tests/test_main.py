import json
import os

import pytest

from konan_env.adapters.project_properties import MappingProjectProperties
from konan_env.config import load_env_file
from konan_env.main import main

VARS = ("CONFIGURATION_BUILD_DIR", "DEBUGGING_SYMBOLS", "KONAN_ENABLE_OPTIMIZATIONS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # set-then-delete so anything loaded from an env file is undone afterwards
    for name in VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_from_assignments():
    props = MappingProjectProperties.from_assignments(["a=1", "b=x=y", "c="])

    assert props.find_property("a") == "1"
    assert props.find_property("b") == "x=y"
    assert props.find_property("c") == ""
    assert props.find_property("missing") is None


@pytest.mark.parametrize("item", ["novalue", "=value"])
def test_from_assignments_rejects_malformed(item):
    with pytest.raises(ValueError):
        MappingProjectProperties.from_assignments([item])


def test_main_disabled_ignores_environment(monkeypatch, capsys):
    monkeypatch.setenv("DEBUGGING_SYMBOLS", "YES")

    assert main([]) == 0

    out = capsys.readouterr().out
    assert "Environment variables: disabled" in out
    assert "Debugging symbols:     no" in out


def test_main_enabled_json(monkeypatch, capsys):
    monkeypatch.setenv("CONFIGURATION_BUILD_DIR", "/abs/out")
    monkeypatch.setenv("DEBUGGING_SYMBOLS", "yes")

    assert main(["-P", "konan.useEnvironmentVariables=true", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {
        "build_output_dir": "/abs/out",
        "debug_symbols_enabled": True,
        "optimizations_enabled": False,
    }


def test_main_relative_dir_fails(monkeypatch, capsys):
    monkeypatch.setenv("CONFIGURATION_BUILD_DIR", "relative/path")

    assert main(["-P", "konan.useEnvironmentVariables=true"]) == 1

    assert "should be absolute" in capsys.readouterr().err


def test_main_malformed_property_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["-P", "konan.useEnvironmentVariables"])

    assert excinfo.value.code == 2


def test_main_env_file(tmp_path, capsys):
    env_file = tmp_path / ".env"
    env_file.write_text("KONAN_ENABLE_OPTIMIZATIONS=YES\n")

    assert main(["-P", "konan.useEnvironmentVariables=true", "--env-file", str(env_file), "--json"]) == 0

    assert json.loads(capsys.readouterr().out)["optimizations_enabled"] is True


def test_env_file_does_not_override(monkeypatch, tmp_path):
    monkeypatch.setenv("DEBUGGING_SYMBOLS", "no")
    env_file = tmp_path / ".env"
    env_file.write_text("DEBUGGING_SYMBOLS=YES\n")

    load_env_file(env_file)

    assert os.environ["DEBUGGING_SYMBOLS"] == "no"


def test_missing_env_file_is_tolerated(tmp_path):
    assert load_env_file(tmp_path / "absent.env") is False
