"""Request schemas + validation.

Wire format (POST /score):
  {"name": "Rex", "score": 1234}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from dino_server.storage.memory import Entry

# Scores are decoded as 32-bit unsigned integers.
MAX_SCORE = 2**32 - 1


class ProtocolError(Exception):
    pass


@dataclass
class ScoreSubmission:
    name: str
    score: int

    @classmethod
    def parse(cls, data: Any) -> "ScoreSubmission":
        if not isinstance(data, dict):
            raise ProtocolError("body must be object")
        name = data.get("name")
        if not isinstance(name, str):
            raise ProtocolError("name must be string")
        score = data.get("score")
        # bool is a subclass of int; JSON true/false is not a score.
        if isinstance(score, bool) or not isinstance(score, int):
            raise ProtocolError("score must be integer")
        if score < 0 or score > MAX_SCORE:
            raise ProtocolError(f"score out of range 0..{MAX_SCORE}")
        return cls(name=name, score=score)


def loads(raw: bytes | str, charset: str | None = None) -> ScoreSubmission:
    if isinstance(raw, bytes):
        try:
            raw = raw.decode(charset or "utf-8")
        except LookupError:
            raise ProtocolError(f"unknown charset: {charset}")
        except UnicodeDecodeError as e:
            raise ProtocolError(f"invalid text: {e}")
    try:
        obj = json.loads(raw)
    except Exception as e:
        raise ProtocolError(f"invalid json: {e}")
    return ScoreSubmission.parse(obj)


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    return {"name": entry.name, "score": entry.score}
