"""Centralized lib_log_rich initialization for all entry points.

Module execution, the console script, and tests all go through
:func:`init_logging`, so the runtime is configured once and the same way
regardless of how the package is invoked.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from sorani_calendar import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Unknown keys are kept and handed to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="cal", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'cal', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name when not configured.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Loads ``.env`` files so ``LOG_*`` variables apply, builds the runtime
    from ``config``, and bridges stdlib :mod:`logging` so module loggers
    (``logging.getLogger(__name__)``) reach lib_log_rich. Later calls
    return immediately.

    Args:
        config: Loaded configuration holding a ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
