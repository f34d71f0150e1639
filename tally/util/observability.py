"""Logfire setup for the API process.

Application code logs and traces through logfire directly:

    logfire.info("Vote recorded", vote_id=str(vote.id), decision="approve")

    with logfire.span("submit_vote", subject_type="contract", subject_id=12):
        ...

This module only configures the SDK and instruments the libraries the
voting core sits on.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tally.config import Settings

SERVICE_NAME = "tally-api"

# Path parameters worth lifting onto request spans
_TRACED_PATH_PARAMS = (
    "subject_type",
    "subject_id",
    "entity_type",
    "entity_id",
    "lc_id",
    "relation_id",
    "vessel_id",
)


def _should_send(settings: Settings) -> bool:
    # Explicit flag wins, otherwise a configured token enables sending
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Events go to the console unless sending is enabled via
    OBSERVABILITY__SEND_TO_LOGFIRE or OBSERVABILITY__LOGFIRE_TOKEN.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, tagged with the subject or entity it targets.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        path_params = getattr(request, "path_params", None) or {}
        for name in _TRACED_PATH_PARAMS:
            if name in path_params:
                result[name] = str(path_params[name])
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace ledger and allocation queries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
