"""HTTP entrypoint for the Dino Run leaderboard.

This server does NOT serve the game client. Host the frontend separately.
"""

from __future__ import annotations

import logging

from aiohttp import web

from dino_server.config import ServerConfig
from dino_server.logging_config import setup_logging
from dino_server.net import protocol
from dino_server.storage.memory import LeaderboardStore

log = logging.getLogger(__name__)

CORS_METHODS = "GET, POST, OPTIONS"
CORS_HEADERS = "Content-Type"


def _cors_headers(config: ServerConfig, origin: str | None) -> dict[str, str]:
    if config.cors_allow_all:
        allow = "*"
    elif origin and origin in config.cors_allowed_origins:
        allow = origin
    else:
        return {}
    headers = {
        "Access-Control-Allow-Origin": allow,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Allow-Headers": CORS_HEADERS,
    }
    if allow != "*":
        headers["Vary"] = "Origin"
    return headers


@web.middleware
async def cors_middleware(request: web.Request, handler):
    cors = _cors_headers(request.app["config"], request.headers.get("Origin"))

    if request.method == "OPTIONS":
        return web.Response(status=204, headers={**cors, "Access-Control-Max-Age": "86400"})

    try:
        resp = await handler(request)
    except web.HTTPException as exc:
        # 404/405 from the router still need CORS so the browser can read them.
        exc.headers.update(cors)
        raise

    resp.headers.update(cors)
    return resp


def create_app(config: ServerConfig | None = None, store: LeaderboardStore | None = None) -> web.Application:
    config = config or ServerConfig()
    if store is None:
        store = LeaderboardStore(cap=config.leaderboard_cap, seed=config.seed())

    app = web.Application(middlewares=[cors_middleware])
    app["config"] = config
    app["store"] = store

    async def root(_: web.Request):
        return web.json_response(
            {
                "ok": True,
                "service": "dino-run-leaderboard",
                "serverVersion": config.server_version,
                "endpoints": {
                    "health": "/health",
                    "scores": "/scores",
                    "submit": "/score",
                },
            }
        )

    async def health(_: web.Request):
        return web.Response(text="Server is running")

    async def get_scores(_: web.Request):
        top = store.top_scores()
        return web.json_response([protocol.entry_to_dict(e) for e in top])

    async def post_score(request: web.Request):
        raw = await request.read()
        try:
            sub = protocol.loads(raw, request.charset)
        except protocol.ProtocolError as e:
            log.warning("Rejected score submission: %s", e)
            return web.json_response({"error": str(e)}, status=400)
        store.submit(sub.name, sub.score)
        return web.json_response({"status": "ok"})

    app.router.add_get("/", root)
    app.router.add_get("/health", health)
    app.router.add_get("/scores", get_scores)
    app.router.add_post("/score", post_score)
    app.router.add_route("OPTIONS", "/{tail:.*}", lambda r: web.Response(status=204))

    return app


def main() -> None:
    config = ServerConfig.from_env()
    setup_logging(config.log_level)
    app = create_app(config)
    log.info("Starting Dino Run game server on http://%s:%d", config.host, config.port)
    try:
        web.run_app(app, host=config.host, port=config.port, print=None)
    except OSError as e:
        log.error("Could not bind %s:%d: %s", config.host, config.port, e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
