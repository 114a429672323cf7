import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from complexity_cli.core.constants import CONFIG_FILENAME

# Configuration defaults - all constants at the top
DEFAULT_LANGUAGE: Optional[str] = None
DEFAULT_CHART_SAMPLES = 100
MAX_CHART_SAMPLES = 1000
DEFAULT_OPEN_BROWSER = True

# Global configuration instance
_config: Optional["ComplexityConfig"] = None


@dataclass
class AnalysisConfig:
    """Classifier output configuration."""

    default_language: Optional[str] = DEFAULT_LANGUAGE
    signatures: bool = False  # Show which idioms fired
    trace: bool = False  # Show the cascade trace


@dataclass
class ChartConfig:
    """Growth chart configuration."""

    samples: int = DEFAULT_CHART_SAMPLES
    open_browser: bool = DEFAULT_OPEN_BROWSER
    output_dir: Optional[str] = None  # Default: temp file

    def __post_init__(self):
        # Sampling stops at n = samples; keep it positive and bounded
        self.samples = max(1, min(int(self.samples), MAX_CHART_SAMPLES))


@dataclass
class ComplexityConfig:
    """Main configuration class for Complexity CLI."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    debug: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "ComplexityConfig":
        """Load configuration from file."""
        config_data = load_config_file(config_path)
        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplexityConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Map flat JSON keys to config fields
        field_mapping = {
            "default_language": "analysis.default_language",
            "show_signatures": "analysis.signatures",
            "show_trace": "analysis.trace",
            "chart_samples": "chart.samples",
            "chart_open_browser": "chart.open_browser",
            "chart_output_dir": "chart.output_dir",
        }

        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                value = config_data.pop(json_key)
                parent, child = config_key.split(".", 1)
                section = config_data.get(parent)
                if not isinstance(section, dict):
                    section = {}
                    config_data[parent] = section
                section[child] = value

        if "analysis" in config_data and isinstance(config_data["analysis"], dict):
            config_data["analysis"] = AnalysisConfig(**config_data["analysis"])

        if "chart" in config_data and isinstance(config_data["chart"], dict):
            config_data["chart"] = ChartConfig(**config_data["chart"])

        known = {"analysis", "chart", "debug", "log_file"}
        return cls(**{k: v for k, v in config_data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    def save(self, path: Optional[Path] = None) -> Path:
        """Save configuration to file."""
        if path is None:
            path = Path.home() / f".{CONFIG_FILENAME}"

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        return Path(path)

    def get_chart_dir(self) -> Optional[Path]:
        """Get the chart output directory, if one is configured."""
        if self.chart.output_dir:
            return Path(self.chart.output_dir).expanduser()
        return None


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from the first readable candidate file."""
    paths = []

    if config_path:
        paths.append(Path(config_path))

    paths.extend(
        [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]
    )

    for path in paths:
        if path.exists():
            try:
                with open(path, "r") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, IOError):
                continue
            if isinstance(data, dict):
                return data

    return {}


def get_config() -> ComplexityConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ComplexityConfig.from_file()
    return _config


def set_config(config: ComplexityConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
