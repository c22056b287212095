from dataclasses import is_dataclass
from pathlib import Path

from gabcard.config import Config


def test_config_is_dataclass() -> None:
    assert is_dataclass(Config)


def test_required_constants() -> None:
    assert Config.GENE_MIN == 0
    assert Config.GENE_MAX == 254
    assert Config.INITIAL_COST == 10000
    assert Config.MUTATION_CHANCE == 0.5
    assert Config.MUTATION_DIRECTION_BIAS == 0.5
    assert len(Config.COLOR_PALETTE) == len(Config.COLOR_THRESHOLDS) + 1


def test_subclass_overrides() -> None:
    class RunConfig(Config):
        POPULATION_SIZE = 7

    assert RunConfig.POPULATION_SIZE == 7
    assert Config.POPULATION_SIZE == 20


def test_create_dirs_creates_paths(tmp_path, monkeypatch) -> None:
    data_dir = tmp_path / "data"
    analysis_dir = data_dir / "analysis"

    monkeypatch.setattr(Config, "DATA_DIR", str(data_dir))
    monkeypatch.setattr(Config, "ANALYSIS_DIR", str(analysis_dir))

    Config.create_dirs()

    assert Path(Config.DATA_DIR).is_dir()
    assert Path(Config.ANALYSIS_DIR).is_dir()
