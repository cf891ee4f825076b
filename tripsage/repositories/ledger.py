"""Generation ledger repository for usage tracking and spend cap enforcement."""

from datetime import datetime
from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session as DBSession
from sqlalchemy import func, desc

from tripsage.db.models import GenerationCall


class LedgerRepository:
    """Repository for generation call tracking."""

    def __init__(self, db: DBSession):
        self.db = db

    def record_call(self,
                    task: str,
                    model: str,
                    attempt: int,
                    outcome: str,
                    prompt_tokens: int = 0,
                    completion_tokens: int = 0,
                    cost_usd: float = 0.0,
                ) -> GenerationCall:
        """Record one upstream generation call.
        Args:
            task (str): Task label.
            model (str): Model name.
            attempt (int): Attempt number within the request (1 or 2).
            outcome (str): 'parsed', 'extraction_failed' or 'upstream_error'.
            prompt_tokens (int): Number of prompt tokens.
            completion_tokens (int): Number of completion tokens.
            cost_usd (float): Cost in USD.
        Returns:
            GenerationCall: Created ledger entry.
        """
        entry = GenerationCall(
            task=task,
            model=model,
            attempt=attempt,
            outcome=outcome,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            cost_usd=cost_usd,
            month_key=datetime.utcnow().strftime("%Y-%m"),
        )

        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)

        return entry

    def get_monthly_spend(self, month_key: Optional[str] = None) -> float:
        """Get total spend for a month. Defaults to current month."""
        if month_key is None:
            month_key = datetime.utcnow().strftime("%Y-%m")

        result = (
            self.db.query(func.sum(GenerationCall.cost_usd))
            .filter(GenerationCall.month_key == month_key)
            .scalar()
        )

        return result or 0.0

    def is_spend_cap_exceeded(self, cap_usd: float, month_key: Optional[str] = None) -> bool:
        """Check if monthly spend cap is exceeded."""
        return self.get_monthly_spend(month_key) >= cap_usd

    def get_monthly_stats(self, month_key: Optional[str] = None) -> Dict[str, Any]:
        """Get monthly statistics.
        Args:
            month_key (Optional[str]): Month in 'YYYY-MM' format. Defaults to current month.
        Returns:
            Dict[str, Any]: Totals for cost, tokens and calls, plus a per-outcome call count.
        """
        if month_key is None:
            month_key = datetime.utcnow().strftime("%Y-%m")

        totals = (
            self.db.query(
                func.sum(GenerationCall.cost_usd).label("total_cost"),
                func.sum(GenerationCall.prompt_tokens).label("total_prompt_tokens"),
                func.sum(GenerationCall.completion_tokens).label("total_completion_tokens"),
                func.count(GenerationCall.id).label("total_calls"),
            )
            .filter(GenerationCall.month_key == month_key)
            .first()
        )

        outcome_rows = (
            self.db.query(GenerationCall.outcome, func.count(GenerationCall.id))
            .filter(GenerationCall.month_key == month_key)
            .group_by(GenerationCall.outcome)
            .all()
        )

        retries = (
            self.db.query(func.count(GenerationCall.id))
            .filter(
                GenerationCall.month_key == month_key,
                GenerationCall.attempt > 1,
            )
            .scalar() or 0
        )

        return {
            "month": month_key,
            "total_cost_usd": totals.total_cost or 0.0,
            "total_prompt_tokens": totals.total_prompt_tokens or 0,
            "total_completion_tokens": totals.total_completion_tokens or 0,
            "total_calls": totals.total_calls or 0,
            "retry_calls": retries,
            "outcomes": {outcome: count for outcome, count in outcome_rows},
        }

    def get_recent_calls(self, limit: int = 50) -> List[GenerationCall]:
        """Get recent ledger entries, newest first."""
        return (
            self.db.query(GenerationCall)
            .order_by(desc(GenerationCall.created_at))
            .limit(limit)
            .all()
        )
