from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_content_index,
    get_i18n_service,
    get_settings,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _load_i18n(app: FastAPI, logger: BoundLogger) -> None:
    # Translation or registry inconsistencies must abort startup
    try:
        i18n = get_i18n_service()
        app.state.i18n = i18n
        logger.info(
            "i18n_loaded",
            locales=[
                locale.value
                for locale in i18n.translation_resolver.available_locales()
            ],
            default_locale=i18n.registry.default_locale().value,
        )
    except Exception as exc:
        logger.error("i18n_initialization_failed", error=str(exc))
        raise

    try:
        content = get_content_index()
        app.state.content_index = content
        logger.info("content_index_ready", post_count=len(content.posts))
    except Exception as exc:
        logger.error("content_index_initialization_failed", error=str(exc))
        raise


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    _load_i18n(app, logger)

    yield

    logger.info("application_shutdown")
