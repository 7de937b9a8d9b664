# src/paper_invest/core/dependencies.py
"""Dependency injection container for the project.
Settings, the token cache, the API connection and the dispatcher are
registered here. Modules can obtain instances via `Container.xxx()`.
"""

from datetime import timedelta

from dependency_injector import containers, providers
from src.paper_invest.config.settings import get_settings
from src.paper_invest.infrastructure.auth.token_cache import TokenCache
from src.paper_invest.infrastructure.connections.paper_invest_connection import (
    PaperInvestConnection,
)
from src.paper_invest.domain.dispatcher import ToolDispatcher


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(get_settings)

    # One token cache for the whole process
    token_cache = providers.Singleton(
        TokenCache,
        api_url=providers.Callable(lambda cfg: cfg.paper_invest.api_url, config),
        timeout=providers.Callable(lambda cfg: cfg.paper_invest.timeout, config),
        default_ttl=providers.Callable(
            lambda cfg: timedelta(seconds=cfg.paper_invest.token_ttl), config
        ),
        single_flight=providers.Callable(
            lambda cfg: cfg.paper_invest.single_flight, config
        ),
    )

    # Connections
    paper_invest = providers.Singleton(
        PaperInvestConnection,
        config=providers.Callable(lambda cfg: cfg.paper_invest.model_dump(), config),
        token_cache=token_cache,
    )

    dispatcher = providers.Singleton(ToolDispatcher, connection=paper_invest)
