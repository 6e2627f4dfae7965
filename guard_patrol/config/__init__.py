from .simulation_config import (
    SimulationConfig,
    SimulatorSettings,
    SearchSettings,
    LoggingSettings,
    load_simulation_config,
)
from .types import LogLevel, Part
