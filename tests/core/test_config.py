import json

from complexity_cli.core.config import (
    MAX_CHART_SAMPLES,
    ChartConfig,
    ComplexityConfig,
    load_config_file,
)


def test_defaults():
    config = ComplexityConfig()
    assert config.analysis.default_language is None
    assert config.analysis.signatures is False
    assert config.chart.samples == 100
    assert config.chart.open_browser is True
    assert config.get_chart_dir() is None


def test_from_dict_maps_flat_keys():
    config = ComplexityConfig.from_dict(
        {
            "default_language": "java",
            "show_trace": True,
            "chart_samples": 50,
            "chart_output_dir": "~/charts",
            "debug": True,
            "unknown_key": 1,
        }
    )
    assert config.analysis.default_language == "java"
    assert config.analysis.trace is True
    assert config.chart.samples == 50
    assert config.get_chart_dir().name == "charts"
    assert config.debug is True


def test_from_dict_accepts_nested_sections():
    config = ComplexityConfig.from_dict({"chart": {"open_browser": False}})
    assert config.chart.open_browser is False
    assert config.chart.samples == 100


def test_chart_samples_are_clamped():
    assert ChartConfig(samples=5000).samples == MAX_CHART_SAMPLES
    assert ChartConfig(samples=0).samples == 1


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "config.json"
    config = ComplexityConfig.from_dict({"default_language": "cpp", "chart_samples": 20})
    saved = config.save(path)

    assert saved == path
    assert ComplexityConfig.from_file(path).to_dict() == config.to_dict()


def test_load_config_file_skips_malformed_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    listing = tmp_path / "list.json"
    listing.write_text(json.dumps([1, 2, 3]))

    assert load_config_file(bad) == {}
    assert load_config_file(listing) == {}


def test_load_config_file_falls_back_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    (tmp_path / "complexity_cli_config.json").write_text(
        json.dumps({"default_language": "python"})
    )

    assert load_config_file(tmp_path / "missing.json") == {"default_language": "python"}
