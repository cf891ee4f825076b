"""Spend cap management for generation usage."""

import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session as DBSession

from tripsage.config import Settings
from tripsage.repositories.ledger import LedgerRepository

logger = logging.getLogger(__name__)


class SpendCapManager:
    """Records generation calls and enforces the monthly spend cap."""

    def __init__(self, settings: Settings, db: DBSession):
        self.settings = settings
        self.ledger_repo = LedgerRepository(db)
        self.monthly_cap_usd = settings.monthly_spend_cap_usd

    def is_spend_cap_exceeded(self, month_key: Optional[str] = None) -> bool:
        """Check if the monthly spend cap has been reached.
        Args:
            month_key (Optional[str]): Month in 'YYYY-MM' format. Defaults to current month
        Returns:
            bool: True if cap reached, False otherwise.
        """
        if month_key is None:
            month_key = datetime.utcnow().strftime("%Y-%m")

        return self.ledger_repo.is_spend_cap_exceeded(self.monthly_cap_usd, month_key)

    def get_spend_status(self, month_key: Optional[str] = None) -> dict:
        """Get cap, spent, remaining and percentage used for a month."""
        if month_key is None:
            month_key = datetime.utcnow().strftime("%Y-%m")

        spent = self.ledger_repo.get_monthly_spend(month_key)
        remaining = max(0.0, self.monthly_cap_usd - spent)
        percentage = (spent / self.monthly_cap_usd) * 100 if self.monthly_cap_usd > 0 else 0

        return {
            "month": month_key,
            "cap_usd": self.monthly_cap_usd,
            "spent_usd": spent,
            "remaining_usd": remaining,
            "percentage_used": percentage,
            "is_capped": spent >= self.monthly_cap_usd,
            "is_warning": percentage >= 80,  # Warning at 80%
        }

    def estimate_call_cost(self,
                            model: str,
                            prompt_tokens: int,
                            completion_tokens: int
                        ) -> float:
        """
        Estimate cost of a generation call.
        Args:
            model (str): Model name (e.g., 'gemini-1.5-flash').
            prompt_tokens (int): Number of prompt tokens.
            completion_tokens (int): Number of candidate tokens.
        Returns:
            float: Estimated cost in USD.

        Note: These are approximate list prices and may differ from actual billing.
        """
        # Cost per 1K tokens
        pricing = {
            "gemini-1.5-flash": {
                "prompt": 0.000075,
                "completion": 0.0003,
            },
            "gemini-1.5-pro": {
                "prompt": 0.00125,
                "completion": 0.005,
            },
            "gemini-pro": {
                "prompt": 0.0005,
                "completion": 0.0015,
            },
        }

        # Default to flash pricing if model not found
        model_pricing = pricing.get(model, pricing["gemini-1.5-flash"])

        prompt_cost = (prompt_tokens / 1000) * model_pricing["prompt"]
        completion_cost = (completion_tokens / 1000) * model_pricing["completion"]

        return prompt_cost + completion_cost

    def record_generation_call(
        self,
        task: str,
        model: str,
        attempt: int,
        outcome: str,
        prompt_tokens: int = 0,
        completion_tokens: int = 0,
    ) -> None:
        """Record a generation call in the ledger."""
        cost_usd = self.estimate_call_cost(model, prompt_tokens, completion_tokens)
        was_capped = self.is_spend_cap_exceeded()

        self.ledger_repo.record_call(
            task=task,
            model=model,
            attempt=attempt,
            outcome=outcome,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            cost_usd=cost_usd,
        )

        if not was_capped and self.is_spend_cap_exceeded():
            logger.warning(
                f"Monthly spend cap of ${self.monthly_cap_usd} reached after this call. "
                f"Further requests will be served from fallback templates."
            )
