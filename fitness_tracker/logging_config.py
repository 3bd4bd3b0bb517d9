import logging
import sys

import sentry_sdk
import structlog
from asgi_correlation_id.context import correlation_id
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from structlog.contextvars import merge_contextvars
from structlog.typing import EventDict, Processor

from .config import Settings

CONSOLE_ENVS = frozenset({"local", "dev", "test"})


class ServiceContext:
    """Stamps every event with the service name and deployment environment."""

    def __init__(self, service: str, env: str):
        self.service = service
        self.env = env

    def __call__(self, logger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", self.service)
        event_dict.setdefault("env", self.env)
        return event_dict


def add_correlation_id(logger, method_name: str, event_dict: EventDict) -> EventDict:
    cid = correlation_id.get(None)
    if cid is not None:
        event_dict["correlation_id"] = cid
    return event_dict


def tag_sentry_scope(logger, method_name: str, event_dict: EventDict) -> EventDict:
    cid = event_dict.get("correlation_id")
    if cid is not None:
        sentry_sdk.set_tag("correlation_id", cid)
    return event_dict


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain for the given settings, renderer last."""
    processors: list[Processor] = [
        merge_contextvars,
        ServiceContext(settings.SERVICE_NAME, settings.APP_ENV),
        add_correlation_id,
    ]
    if settings.SENTRY_DSN:
        processors.append(tag_sentry_scope)
    processors += [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.APP_ENV.lower() in CONSOLE_ENVS:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def init_sentry(settings: Settings) -> bool:
    if not settings.SENTRY_DSN:
        return False
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.APP_ENV,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=False,
    )
    sentry_sdk.set_tag("service", settings.SERVICE_NAME)
    return True


def configure_logging(settings: Settings) -> None:
    log_level = resolve_log_level(settings.LOG_LEVEL)
    init_sentry(settings)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level, force=True)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
