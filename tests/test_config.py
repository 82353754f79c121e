import pytest
import yaml

from reflexkit.config import Config, ConfigError, load_config


def _write(tmp_path, text):
    (tmp_path / "reflex.yaml").write_text(text, encoding="utf-8")


def test_load_reads_all_fields(tmp_path):
    _write(
        tmp_path,
        "frontend: src/frontend\nbackend: src/backend\npublic: src/public\noutput: out\n",
    )
    conf = load_config(tmp_path)
    assert conf == Config(
        frontend_dir="src/frontend",
        backend_dir="src/backend",
        public_dir="src/public",
        output_dir="out",
    )


def test_missing_keys_default_to_empty(tmp_path):
    _write(tmp_path, "output: out\n")
    conf = load_config(tmp_path)
    assert conf.output_dir == "out"
    assert conf.frontend_dir == ""
    assert conf.backend_dir == ""


def test_unknown_keys_are_ignored(tmp_path):
    _write(tmp_path, "output: out\nextra: thing\n")
    assert load_config(tmp_path).output_dir == "out"


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="failed to open config file"):
        load_config(tmp_path)


def test_invalid_yaml_raises(tmp_path):
    _write(tmp_path, "frontend: [unclosed\n")
    with pytest.raises(ConfigError, match="failed to decode config file"):
        load_config(tmp_path)


def test_empty_file_raises(tmp_path):
    _write(tmp_path, "")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_mapping_raises(tmp_path):
    _write(tmp_path, "- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_list_value_raises(tmp_path):
    _write(tmp_path, "frontend:\n  - a\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_to_mapping_key_order():
    conf = Config("f", "b", "p", "o")
    assert list(conf.to_mapping()) == ["frontend", "backend", "public", "output"]


def test_round_trip_through_file(tmp_path):
    conf = Config("frontend", "backend", "public", "out")
    _write(tmp_path, yaml.safe_dump(conf.to_mapping(), sort_keys=False))
    assert load_config(tmp_path) == conf


def test_load_uses_working_directory(tmp_path, monkeypatch):
    _write(tmp_path, "backend: backend\n")
    monkeypatch.chdir(tmp_path)
    assert load_config().backend_dir == "backend"