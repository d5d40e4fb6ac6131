"""
ASGI application for the practice site.

This server provides:
1. Static file serving for every demo page
2. JSON endpoints backed by the validation engine
3. Simulated-latency dynamic content
4. The mock API fixture and a scripted failure

Usage:
    python run_site_server.py
    # Then open http://localhost:8000
"""

import asyncio
import json
import logging
import random
from pathlib import Path
from typing import Any, Sequence

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from practice_site.config import SiteConfig, get_config
from practice_site.dynamic import simulated_delay
from practice_site.errors import FixtureError
from practice_site.fixtures import FixtureLoader
from practice_site.models.field_rules import FieldRule
from practice_site.pages.dynamic import CONTENT_BLOCK
from practice_site.validation import CONTACT_FORM_RULES, LOGIN_RULES, validate

logger = logging.getLogger("practice-site")


class BadRequest(Exception):
    """Request body could not be used."""


async def read_form_values(request: Request) -> dict[str, str | None]:
    """Parse a JSON object body into raw string values."""
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BadRequest(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")

    values: dict[str, str | None] = {}
    for key, value in data.items():
        if value is None:
            values[key] = None
        elif isinstance(value, str):
            values[key] = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            values[key] = str(value)
        else:
            raise BadRequest(f"Field {key!r} must be a string or number")
    return values


def create_app(config: SiteConfig | None = None, rng: random.Random | None = None) -> Starlette:
    """
    Create the Starlette app.

    Args:
        config: Settings to use. Defaults to the module configuration.
        rng: Random source for the dynamic content jitter.
    """
    config = config or get_config()
    rng = rng or random.Random()
    site_dir = Path(config.site_dir)
    loader = FixtureLoader(site_dir)

    async def validate_form(
        request: Request,
        rules: Sequence[FieldRule],
        name: str,
        on_valid: dict[str, Any] | None = None,
    ) -> JSONResponse:
        try:
            values = await read_form_values(request)
        except BadRequest as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        state = validate(rules, values)
        body: dict[str, Any] = {"valid": state.is_valid, "form": state.model_dump()}
        if state.is_valid:
            body.update(on_valid or {})
            return JSONResponse(body)

        logger.info("%s form rejected: %s", name, ", ".join(state.invalid_fields))
        body["error"] = state.first_error
        return JSONResponse(body, status_code=422)

    async def health_check(request: Request) -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "service": "practice-site",
            "port": config.port,
        })

    async def validate_login(request: Request) -> JSONResponse:
        return await validate_form(
            request, LOGIN_RULES, "login", on_valid={"redirect": config.welcome_path}
        )

    async def validate_contact_form(request: Request) -> JSONResponse:
        return await validate_form(request, CONTACT_FORM_RULES, "contact")

    async def dynamic_content(request: Request) -> JSONResponse:
        """Respond with the content block after the simulated latency."""
        delay = simulated_delay(config.dynamic_delay, config.dynamic_jitter, rng)
        await asyncio.sleep(delay)
        return JSONResponse({"state": "loaded", "content": CONTENT_BLOCK, "delay": delay})

    async def api_users(request: Request) -> JSONResponse:
        try:
            outcome = loader.fetch()
        except FixtureError as e:
            logger.error("Fixture unavailable: %s", e)
            return JSONResponse({"error": "Fixture unavailable"}, status_code=500)
        return JSONResponse(outcome.model_dump())

    async def api_broken(request: Request) -> JSONResponse:
        outcome = loader.fetch_broken()
        return JSONResponse(outcome.model_dump(), status_code=outcome.status)

    return Starlette(
        debug=config.debug,
        routes=[
            Route("/health", health_check, methods=["GET"]),
            Route("/auth/validate", validate_login, methods=["POST"]),
            Route("/forms/validate", validate_contact_form, methods=["POST"]),
            Route("/dynamic/content", dynamic_content, methods=["GET"]),
            Route("/api/users", api_users, methods=["GET"]),
            Route("/api/broken", api_broken, methods=["GET"]),
            Mount("/", app=StaticFiles(directory=site_dir, html=True), name="site"),
        ],
    )


async def run_site_server(host: str = "127.0.0.1", port: int = 8000, config: SiteConfig | None = None) -> None:
    """
    Serve the site with uvicorn.

    Args:
        host: Host to bind to
        port: Port to listen on
        config: Settings to use. Defaults to the module configuration.
    """
    import uvicorn

    config = config or get_config()
    logger.info(f"Serving {config.site_dir} on http://{host}:{port}")

    app = create_app(config)
    uvicorn_config = uvicorn.Config(app, host=host, port=port, log_level=config.log_level.lower())
    server_instance = uvicorn.Server(uvicorn_config)
    await server_instance.serve()
