# File: traintool/config.py
"""
TrainTool Configuration Management
Chart defaults, performance and logging settings for the calculation engine.
"""
import json
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Union, Any
from dataclasses import dataclass, asdict
from enum import Enum

from .models import Hilliness


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ChartDefaults:
    """Operating point used when the caller does not choose one"""
    cargo_factor: int = 15
    slope_percentage: int = 1
    tiles_between_slopes: int = 0
    hilliness: Hilliness = Hilliness.NO_SLOPES
    static_friction: bool = False
    locomotive_count: int = 1

    def __post_init__(self):
        if isinstance(self.hilliness, str):
            self.hilliness = Hilliness[self.hilliness]


@dataclass
class PerformanceConfig:
    """Curve evaluation settings"""
    max_workers: Optional[int] = None  # None = evaluate samples sequentially


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: LogLevel = LogLevel.INFO
    rich_tracebacks: bool = True

    def __post_init__(self):
        if isinstance(self.level, str):
            self.level = LogLevel(self.level.lower())


@dataclass
class EngineConfig:
    """Main configuration class containing all settings"""
    charts: ChartDefaults = None
    performance: PerformanceConfig = None
    logging: LoggingConfig = None

    version: str = "1.0.0"

    def __post_init__(self):
        """Initialize default configurations"""
        if self.charts is None:
            self.charts = ChartDefaults()
        if self.performance is None:
            self.performance = PerformanceConfig()
        if self.logging is None:
            self.logging = LoggingConfig()

    def save_to_file(self, file_path: Union[str, Path]):
        """Save configuration to file (JSON or YAML)"""
        file_path = Path(file_path)
        config_dict = self.to_dict()

        if file_path.suffix.lower() in ['.yaml', '.yml']:
            with open(file_path, 'w') as f:
                yaml.dump(config_dict, f, default_flow_style=False, indent=2)
        else:
            with open(file_path, 'w') as f:
                json.dump(config_dict, f, indent=2, default=str)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> 'EngineConfig':
        """Load configuration from file"""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        if file_path.suffix.lower() in ['.yaml', '.yml']:
            with open(file_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        else:
            with open(file_path, 'r') as f:
                config_data = json.load(f)

        return cls.from_dict(config_data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        def convert_value(value):
            if isinstance(value, Hilliness):
                return value.name
            elif isinstance(value, Enum):
                return value.value
            elif isinstance(value, dict):
                return {k: convert_value(v) for k, v in value.items()}
            elif isinstance(value, (list, tuple)):
                return [convert_value(item) for item in value]
            else:
                return value

        # asdict() keeps enum members as-is, so nested dicts still hold them
        return convert_value(asdict(self))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'EngineConfig':
        """Create configuration from dictionary"""
        config_kwargs = {}

        if 'charts' in config_dict:
            config_kwargs['charts'] = ChartDefaults(**config_dict['charts'])

        if 'performance' in config_dict:
            config_kwargs['performance'] = PerformanceConfig(**config_dict['performance'])

        if 'logging' in config_dict:
            config_kwargs['logging'] = LoggingConfig(**config_dict['logging'])

        if 'version' in config_dict:
            config_kwargs['version'] = config_dict['version']

        return cls(**config_kwargs)

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        if not 0 <= self.charts.cargo_factor <= 100:
            issues.append(f"Invalid cargo_factor: {self.charts.cargo_factor} (must be 0..100)")

        if self.charts.slope_percentage < 0:
            issues.append(f"Invalid slope_percentage: {self.charts.slope_percentage} (must be >= 0)")

        if self.charts.tiles_between_slopes < 0:
            issues.append(
                f"Invalid tiles_between_slopes: {self.charts.tiles_between_slopes} (must be >= 0)"
            )

        if self.charts.locomotive_count < 1:
            issues.append(f"Invalid locomotive_count: {self.charts.locomotive_count} (must be >= 1)")

        if self.performance.max_workers is not None and self.performance.max_workers <= 0:
            issues.append(f"Invalid max_workers: {self.performance.max_workers} (must be > 0)")

        return issues

    def __str__(self) -> str:
        return f"EngineConfig(version={self.version})"


def get_default_config() -> EngineConfig:
    """Get default configuration"""
    return EngineConfig()


def create_testing_config() -> EngineConfig:
    """Create configuration optimized for testing"""
    config = EngineConfig()
    config.logging.level = LogLevel.WARNING
    config.performance.max_workers = 2
    return config
