"""Composition root: wires settings, the HTTP client and a RegistryClient."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from npm_registry.config import RegistrySettings, debug_enabled, set_debug
from npm_registry.registry.client import RegistryClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_registry(settings: RegistrySettings | None = None) -> AsyncIterator[RegistryClient]:
    """Yield a ready-to-use RegistryClient and close its HTTP client on exit.

    Settings default to ``RegistrySettings.from_env()``. A configured token
    is applied through ``RegistryClient.login``. ``settings.debug`` can only
    switch the debug flag on; its previous value is restored on exit.
    """
    if settings is None:
        settings = RegistrySettings.from_env()
    previous_debug = debug_enabled()
    if settings.debug:
        set_debug(True)

    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout),
            follow_redirects=True,
            headers={"Accept": "application/json"},
        ) as http_client:
            registry = RegistryClient(http_client, url=settings.url, api_url=settings.api_url)
            if settings.token:
                registry.login(settings.token)
                logger.info("Using npm token from settings for %s", settings.url)
            yield registry
    finally:
        set_debug(previous_debug)
