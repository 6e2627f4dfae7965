from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .types import LogLevel


class SimulatorSettings(BaseModel):
    """Patrol driver settings."""

    render: bool = False
    render_delay: float = Field(default=0.1, alias="renderDelay", ge=0.0)  # seconds

    model_config = ConfigDict(populate_by_name=True)


class SearchSettings(BaseModel):
    """Placement search settings."""

    parallel: bool = False
    processes: int | None = Field(default=None, gt=0)
    chunk_size: int = Field(default=64, alias="chunkSize", gt=0)

    model_config = ConfigDict(populate_by_name=True)


class LoggingSettings(BaseModel):
    level: LogLevel = LogLevel.INFO
    file: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class SimulationConfig(BaseModel):
    """Root configuration model."""

    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(populate_by_name=True)


def load_simulation_config(path: str | Path) -> SimulationConfig:
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {path}")
    json_content = config_path.read_text()
    config = SimulationConfig.model_validate_json(json_content)
    return config
