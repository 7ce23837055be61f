import json

import pytest

from cli.main import main


def test_cli_prints_one_line_per_row(capsys):
    main(["--epochs", "50", "--seed", "1"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 4
    assert [line.split(" -> ")[0] for line in lines] == ["0, 0", "0, 1", "1, 0", "1, 1"]
    for line in lines:
        values = json.loads(line.split(" -> ")[1])
        assert len(values) == 1
        assert 0.0 < values[0] < 1.0


def test_cli_progress_and_artifacts(tmp_path, capsys):
    run_dir = tmp_path / "run"
    dump = tmp_path / "resolved.json"
    main(
        [
            "--preset",
            "and",
            "--epochs",
            "200",
            "--lr",
            "0.3",
            "--seed",
            "2",
            "--run-dir",
            str(run_dir),
            "--progress",
            "--dump-config",
            str(dump),
        ]
    )
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Epoch: 0%"
    assert "Epoch: 100%" in out
    assert (run_dir / "metrics.jsonl").exists()
    assert (run_dir / "manifest.json").exists()
    resolved = json.loads(dump.read_text())
    assert resolved["data"]["name"] == "and"
    assert resolved["train"]["lr"] == 0.3


def test_cli_config_override(tmp_path, capsys):
    override = tmp_path / "override.json"
    override.write_text(json.dumps({"train": {"epochs": 10, "seed": 0}}))
    main(["--config", str(override)])
    assert len(capsys.readouterr().out.strip().splitlines()) == 4


def test_cli_list_presets(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--list-presets"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.split() == ["and", "nand", "or", "xor"]


def test_cli_enable_plots_requires_run_dir():
    with pytest.raises(SystemExit) as exc:
        main(["--epochs", "5", "--enable-plots"])
    assert "--run-dir" in str(exc.value.code)


def test_cli_enable_plots_writes_curve(tmp_path, capsys):
    main(["--epochs", "20", "--seed", "0", "--run-dir", str(tmp_path), "--enable-plots"])
    assert (tmp_path / "loss.png").exists()
    assert len(capsys.readouterr().out.strip().splitlines()) == 4
