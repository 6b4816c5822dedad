"""Default configuration parameters for tickstate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingParams:
    """structlog output parameters, passed to configure_logging."""
    level: str = "INFO"                              # stdlib level name
    format_json: bool = False                        # JSON vs console renderer
    include_timestamp: bool = True
    include_caller: bool = False                     # filename/lineno processor


@dataclass(frozen=True)
class MachineParams:
    """Per-machine diagnostic parameters."""
    log_ticks: bool = False                          # debug line on every executed tick
    log_transitions: bool = True                     # info line on every transition


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams
    machine: MachineParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        machine=MachineParams(),
    )
