"""Credit balance lookup."""

from __future__ import annotations

from gradium_client.state.voices import CreditsSummary

from .rest import RestResource


class CreditsService(RestResource):
    async def get(self) -> CreditsSummary:
        body = self._json(await self._request("GET", "/usages/credits"))
        return CreditsSummary(
            remaining_credits=int(body.get("remaining_credits") or 0),
            allocated_credits=int(body.get("allocated_credits") or 0),
            billing_period=str(body.get("billing_period") or ""),
            plan_name=str(body.get("plan_name") or ""),
            next_rollover_date=body.get("next_rollover_date"),
        )


__all__ = ["CreditsService"]
