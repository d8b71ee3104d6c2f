import pytest

from mainland.errors import ConfigError
from mainland.schemas import DEFAULT_EXPORT_NAME, ClassifierConfig, ExportRow


def test_defaults():
    config = ClassifierConfig()
    assert config.inputs.mode == "named"
    assert config.inputs.name_property == "NAME_EN"
    assert config.output.export == DEFAULT_EXPORT_NAME
    assert config.workers == 1


def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "inputs:\n"
        "  records: borders.csv\n"
        "  geometry: land.json\n"
        "  mode: flat\n"
        "workers: 3\n",
        encoding="utf-8",
    )
    config = ClassifierConfig.from_yaml(str(path))
    assert config.inputs.records == "borders.csv"
    assert config.inputs.mode == "flat"
    assert config.workers == 3


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert ClassifierConfig.from_yaml(str(path)) == ClassifierConfig()


@pytest.mark.parametrize("content", [
    "inputs:\n  mode: sideways\n",
    "workers: 0\n",
    "inputs:\n  delimiter: \"::\"\n",
    "inputs:\n  delimiter: \"\"\n",
    "inputs: [1, 2\n",
])
def test_invalid_yaml_raises_config_error(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        ClassifierConfig.from_yaml(str(path))


def test_missing_yaml_raises_config_error(tmp_path):
    with pytest.raises(ConfigError):
        ClassifierConfig.from_yaml(str(tmp_path / "missing.yaml"))


def test_export_row_aliases():
    row = ExportRow(boundaryId="B1", countryName="France")
    assert row.boundary_id == "B1"
    assert row.model_dump(by_alias=True) == {"boundaryId": "B1", "countryName": "France"}
