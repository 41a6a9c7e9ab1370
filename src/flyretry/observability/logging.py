# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from flyretry.core.config import Config


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    module_levels: dict[str, str] | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, output logs as JSON lines. If False, use
            colored console output for development.
        module_levels: Optional per-logger levels, e.g.
            ``{"flyretry.client.retry": "DEBUG"}``.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    for name, module_level in (module_levels or {}).items():
        logging.getLogger(name).setLevel(getattr(logging, module_level.upper(), logging.INFO))


def configure_from_config(config: Config) -> None:
    """Configure logging from the ``flyretry.logging`` section.

    ``flyretry.logging.level.root`` sets the root level; every other key
    under ``flyretry.logging.level`` is a logger name. ``flyretry.logging.format``
    is ``console`` (default) or ``json``.
    """
    levels = {k: str(v).upper() for k, v in config.get_section("flyretry.logging.level").items()}
    root = levels.pop("root", "INFO")
    fmt = str(config.get("flyretry.logging.format", "console")).lower()
    configure_logging(level=root, json_output=fmt == "json", module_levels=levels)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger by name."""
    return structlog.get_logger(name)
