"""Voice and credit resources (dataclasses only)."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass


@dataclass(slots=True)
class Voice:
    uid: str
    name: str
    filename: str = ""
    start_s: float = 0.0
    stop_s: float | None = None
    description: str | None = None
    language: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Voice:
        stop_s = data.get("stop_s")
        return cls(
            uid=str(data.get("uid") or ""),
            name=str(data.get("name") or ""),
            filename=str(data.get("filename") or ""),
            start_s=float(data.get("start_s") or 0.0),
            stop_s=float(stop_s) if stop_s is not None else None,
            description=data.get("description"),
            language=data.get("language"),
        )


@dataclass(slots=True)
class VoiceListParams:
    skip: int = 0
    limit: int = 0
    include_catalog: bool = False


@dataclass(slots=True)
class VoiceCreateParams:
    name: str
    description: str | None = None
    language: str | None = None
    start_s: float = 0.0
    timeout_s: float = 0.0
    input_format: str = ""


@dataclass(slots=True)
class VoiceCreateResponse:
    uid: str | None = None
    error: str | None = None
    was_updated: bool = False


@dataclass(slots=True)
class VoiceUpdateParams:
    name: str | None = None
    description: str | None = None
    language: str | None = None
    start_s: float | None = None
    tags: list[dict[str, Any]] = field(default_factory=list)
    rank: float | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for key in ("name", "description", "language", "start_s", "rank"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        if self.tags:
            payload["tags"] = list(self.tags)
        return payload


@dataclass(slots=True)
class CreditsSummary:
    remaining_credits: int
    allocated_credits: int
    billing_period: str
    plan_name: str
    next_rollover_date: str | None = None


__all__ = [
    "CreditsSummary",
    "Voice",
    "VoiceCreateParams",
    "VoiceCreateResponse",
    "VoiceListParams",
    "VoiceUpdateParams",
]
