import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib

from .adapters.scheduler.asyncio_scheduler import AsyncioScheduler
from .application.publisher import TimerPublisher
from .domain.models import DEFAULT_INTERVAL, validate_interval
from .infrastructure.clock import Clock, SystemClock
from .ports.scheduler import SchedulerPort


@dataclass
class TimerSettings:
    default_interval: float


@dataclass
class LoggingSettings:
    level: str


@dataclass
class Settings:
    timer: TimerSettings
    logging: LoggingSettings


def load_settings(settings_path: Path = Path("config/settings.toml")) -> Settings:
    """Load configuration from environment with optional config file defaults."""

    file_settings = _load_file_settings(settings_path)

    return Settings(
        timer=TimerSettings(
            default_interval=validate_interval(
                float(
                    _config_value(
                        "TIMER_DEFAULT_INTERVAL", file_settings, "timer", "default_interval", str(DEFAULT_INTERVAL)
                    )
                )
            ),
        ),
        logging=LoggingSettings(
            level=_config_value("TIMER_LOG_LEVEL", file_settings, "logging", "level", "INFO"),
        ),
    )


def _load_file_settings(settings_path: Path) -> Dict[str, Any]:
    if not settings_path.exists():
        return {}

    with settings_path.open("rb") as settings_file:
        return tomllib.load(settings_file)


def _config_value(
    env_key: str, settings: Dict[str, Any], section: str, key: str, default: str
) -> str:
    if env_key in os.environ:
        return os.environ[env_key]

    section_data = settings.get(section, {})
    return str(section_data.get(key, default))


def build_components(settings: Optional[Settings] = None) -> dict:
    """Construct the clock, scheduler and publisher for wiring in main.py."""

    settings = settings or load_settings()
    clock: Clock = SystemClock()
    scheduler: SchedulerPort = AsyncioScheduler()
    publisher = TimerPublisher(
        clock=clock, scheduler=scheduler, default_interval=settings.timer.default_interval
    )
    return {
        "settings": settings,
        "clock": clock,
        "scheduler": scheduler,
        "publisher": publisher,
    }
