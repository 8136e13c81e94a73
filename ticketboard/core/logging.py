"""Logging for the ``ticketboard`` package and optional OTLP tracing."""

from __future__ import annotations

import logging
from logging.config import dictConfig

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from ticketboard.core.config import Settings

PACKAGE_LOGGER = "ticketboard"

_provider: TracerProvider | None = None


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a console handler to the package logger.

    The store and the form controller log under ``ticketboard.tickets.*``, so
    they inherit the level and format set here. Other loggers, Streamlit's
    included, are left alone.
    """

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "board": {"format": settings.log_format},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "board",
                },
            },
            "loggers": {
                PACKAGE_LOGGER: {"handlers": ["console"], "level": level},
            },
        }
    )
    return logging.getLogger(PACKAGE_LOGGER)


def init_tracer(settings: Settings) -> TracerProvider | None:
    """Export the store's spans over OTLP/HTTP when tracing is enabled.

    Exporter headers, timeouts and the default endpoint come from the standard
    ``OTEL_EXPORTER_OTLP_*`` variables; ``otel_exporter_otlp_endpoint`` only
    overrides the endpoint.
    """

    global _provider

    if not settings.otel_enabled:
        return None
    if _provider is not None:
        return _provider

    if settings.otel_exporter_otlp_endpoint:
        exporter = OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint)
    else:
        exporter = OTLPSpanExporter()

    _provider = TracerProvider(resource=Resource.create({SERVICE_NAME: settings.otel_service_name}))
    _provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(_provider)
    logging.getLogger(PACKAGE_LOGGER).info("Tracing enabled for %s", settings.otel_service_name)
    return _provider


def shutdown_tracer() -> None:
    """Flush pending spans and release the provider installed by :func:`init_tracer`."""

    global _provider

    if _provider is None:
        return
    _provider.shutdown()
    _provider = None
