import json
from pathlib import Path

import pytest

from backpropnet.training import pipelines


def _config(tmp_path, **train):
    config = pipelines.load_preset("or")
    config["train"].update({"epochs": 300, "seed": 4, "run_dir": str(tmp_path / "run")})
    config["train"].update(train)
    return config


def test_presets_are_deep_copies():
    first = pipelines.load_preset("xor")
    first["model"]["layers"].append(9)
    assert pipelines.load_preset("xor")["model"]["layers"] == [2, 3, 1]
    assert set(pipelines.presets()) == {"xor", "and", "or", "nand"}


def test_xor_preset_matches_demo():
    config = pipelines.load_preset("xor")
    assert config["model"] == {"layers": [2, 3, 1], "activation": "sigmoid"}
    assert config["train"]["epochs"] == 10000
    assert config["train"]["lr"] == 0.5


def test_unknown_preset():
    with pytest.raises(KeyError):
        pipelines.load_preset("missing")


def test_pipeline_produces_artifacts(tmp_path):
    result = pipelines.run_pipeline(_config(tmp_path))
    assert result.epochs == 300
    assert len(result.predictions) == 4
    assert all(len(row) == 1 for row in result.predictions)

    metrics = [json.loads(line) for line in Path(result.metrics_path).read_text().splitlines()]
    assert metrics[0]["epoch"] == 0
    assert metrics[-1]["progress"] == 100
    assert all("loss" in entry for entry in metrics)
    assert (tmp_path / "run" / "metrics.csv").exists()

    manifest = json.loads(Path(result.manifest_path).read_text())
    assert manifest["config"]["train"]["seed"] == 4
    assert manifest["model"]["parameter_count"] == 13
    assert manifest["final_loss"] == pytest.approx(result.final_loss)
    assert result.plot_path == ""


def test_pipeline_without_run_dir_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = _config(tmp_path, run_dir=None, epochs=20)
    result = pipelines.run_pipeline(config)
    assert result.metrics_path == "" and result.manifest_path == ""
    assert list(tmp_path.iterdir()) == []


def test_pipeline_determinism(tmp_path):
    first = pipelines.run_pipeline(_config(tmp_path / "a"))
    second = pipelines.run_pipeline(_config(tmp_path / "b"))
    assert first.predictions == second.predictions
    assert first.final_loss == second.final_loss


def test_pipeline_rejects_missing_sections():
    with pytest.raises(KeyError):
        pipelines.run_pipeline({"data": {"name": "xor"}})


def test_merge_config_partial_and_full():
    base = pipelines.load_preset("xor")
    merged = pipelines.merge_config(base, {"train": {"epochs": 5}})
    assert merged["train"]["epochs"] == 5
    assert merged["train"]["lr"] == 0.5
    assert base["train"]["epochs"] == 10000

    full = pipelines.load_preset("and")
    assert pipelines.merge_config(base, full) == full


def test_load_config_json_and_yaml(tmp_path):
    json_path = tmp_path / "override.json"
    json_path.write_text(json.dumps({"train": {"lr": 0.25}}))
    assert pipelines.load_config(json_path) == {"train": {"lr": 0.25}}

    pytest.importorskip("yaml")
    yaml_path = tmp_path / "override.yaml"
    yaml_path.write_text("model:\n  activation: tanh\n")
    assert pipelines.load_config(yaml_path) == {"model": {"activation": "tanh"}}


def test_load_config_rejects_bad_files(tmp_path):
    txt = tmp_path / "override.txt"
    txt.write_text("{}")
    with pytest.raises(ValueError):
        pipelines.load_config(txt)

    listing = tmp_path / "override.json"
    listing.write_text("[1, 2]")
    with pytest.raises(TypeError):
        pipelines.load_config(listing)


def test_build_network_resolves_activation():
    config = pipelines.merge_config(
        pipelines.load_preset("xor"), {"model": {"activation": "tanh", "layers": [2, 4, 1]}}
    )
    network = pipelines.build_network(config)
    assert network.activation.name == "tanh"
    assert network.layers == [2, 4, 1]


def test_pipeline_plots_returned_history(tmp_path):
    result = pipelines.run_pipeline(_config(tmp_path, epochs=30, enable_plots=True))
    assert result.plot_path == str(tmp_path / "run" / "loss.png")
    assert Path(result.plot_path).exists()


def test_pipeline_rejects_plots_without_run_dir(tmp_path):
    with pytest.raises(ValueError):
        pipelines.run_pipeline(_config(tmp_path, run_dir=None, enable_plots=True))
