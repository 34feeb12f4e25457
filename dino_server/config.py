"""Bind address, CORS policy, leaderboard size and seed scores."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dino_server.storage.memory import Entry


def _default_seed() -> list[Entry]:
    return [
        Entry(name="T-Rex", score=1500),
        Entry(name="Raptor", score=1200),
        Entry(name="Stego", score=900),
    ]


@dataclass
class ServerConfig:
    server_version: str = "0.1.0"

    # Network
    host: str = "127.0.0.1"
    port: int = 8080
    cors_allow_all: bool = True
    cors_allowed_origins: list[str] = field(default_factory=list)

    # Leaderboard
    leaderboard_cap: int = 100
    seed_enabled: bool = True
    seed_scores: list[Entry] = field(default_factory=_default_seed)

    log_level: str = "INFO"

    def seed(self) -> list[Entry]:
        return list(self.seed_scores) if self.seed_enabled else []

    @staticmethod
    def _parse_bool(v: str | None, default: bool) -> bool:
        if v is None:
            return default
        return v.strip().lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _parse_int(v: str | None, default: int) -> int:
        if not v:
            return default
        try:
            return int(v)
        except ValueError:
            return default

    @classmethod
    def from_env(cls) -> "ServerConfig":
        cfg = cls()
        cfg.host = os.environ.get("DINO_HOST", cfg.host)
        cfg.port = cls._parse_int(os.environ.get("DINO_PORT"), cfg.port)
        cfg.cors_allow_all = cls._parse_bool(os.environ.get("DINO_CORS_ALLOW_ALL"), cfg.cors_allow_all)
        cfg.seed_enabled = cls._parse_bool(os.environ.get("DINO_SEED"), cfg.seed_enabled)
        cap = cls._parse_int(os.environ.get("DINO_LEADERBOARD_CAP"), cfg.leaderboard_cap)
        if cap > 0:
            cfg.leaderboard_cap = cap
        cfg.log_level = os.environ.get("DINO_LOG_LEVEL", cfg.log_level)
        origins = os.environ.get("DINO_CORS_ORIGINS")
        if origins:
            cfg.cors_allowed_origins = [o.strip() for o in origins.split(",") if o.strip()]
        return cfg
