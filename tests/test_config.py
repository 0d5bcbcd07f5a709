import json
import sys
from pathlib import Path

import pytest
import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from traintool.config import (
    ChartDefaults,
    EngineConfig,
    LogLevel,
    create_testing_config,
    get_default_config,
)
from traintool.models import Hilliness


def test_defaults():
    config = get_default_config()
    assert config.charts.cargo_factor == 15
    assert config.charts.slope_percentage == 1
    assert config.charts.hilliness is Hilliness.NO_SLOPES
    assert config.charts.static_friction is False
    assert config.performance.max_workers is None
    assert config.logging.level is LogLevel.INFO
    assert config.validate() == []


def test_to_dict_is_plain():
    data = get_default_config().to_dict()
    assert data["charts"]["hilliness"] == "NO_SLOPES"
    assert data["logging"]["level"] == "info"
    json.dumps(data)


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_file_round_trip(tmp_path, suffix):
    config = create_testing_config()
    config.charts.hilliness = Hilliness.MULTIPLE_SLOPES
    config.charts.tiles_between_slopes = 3
    path = tmp_path / f"engine{suffix}"

    config.save_to_file(path)
    loaded = EngineConfig.load_from_file(path)

    assert loaded.to_dict() == config.to_dict()
    assert loaded.charts.hilliness is Hilliness.MULTIPLE_SLOPES
    assert loaded.logging.level is LogLevel.WARNING
    assert loaded.performance.max_workers == 2


def test_partial_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "engine.yml"
    path.write_text(yaml.safe_dump({"charts": {"cargo_factor": 80}}))
    loaded = EngineConfig.load_from_file(path)
    assert loaded.charts.cargo_factor == 80
    assert loaded.charts.slope_percentage == 1
    assert loaded.logging.level is LogLevel.INFO


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        EngineConfig.load_from_file("does/not/exist.yaml")


def test_validate_reports_issues():
    config = EngineConfig(charts=ChartDefaults(cargo_factor=120, locomotive_count=0))
    config.performance.max_workers = 0
    issues = config.validate()
    assert len(issues) == 3
    assert any("cargo_factor" in issue for issue in issues)
