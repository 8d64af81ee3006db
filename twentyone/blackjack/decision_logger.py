"""
Logging for blackjack decisions.
Tracks every hit/stand decision and the outcome each player is given.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from .display import Outcome


@dataclass
class DecisionContext:
    """Context for a single hit/stand decision."""

    timestamp: datetime
    participant_name: str
    hand_cards: List[str]
    hand_total: int
    is_soft: bool
    hit: bool
    reason: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "participant": self.participant_name,
            "cards": self.hand_cards,
            "total": self.hand_total,
            "soft": self.is_soft,
            "hit": self.hit,
            "reason": self.reason,
            "extra": self.extra,
        }


class DecisionLogger:
    """Logs all decision-making processes in blackjack."""

    def __init__(self, log_level=logging.NOTSET):
        self.logger = logging.getLogger("twentyone.decisions")
        # NOTSET inherits the root level that main() configures
        # Simulations can silence this through the environment
        if os.environ.get("TWENTYONE_DISABLE_LOGGING", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)
        else:
            self.logger.setLevel(log_level)

        self.decision_history: List[DecisionContext] = []
        self.current_round_decisions: List[DecisionContext] = []

    def set_level(self, level):
        """Set the logging level."""
        self.logger.setLevel(level)

    def log_decision(self, participant, hit: bool, reason: str = "") -> DecisionContext:
        """Log a hit/stand decision with the hand it was made on."""
        context = DecisionContext(
            timestamp=datetime.now(),
            participant_name=participant.name,
            hand_cards=[str(card) for card in participant.hand.cards],
            hand_total=participant.total(),
            is_soft=participant.hand.is_soft,
            hit=hit,
            reason=reason,
        )
        self.current_round_decisions.append(context)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Decision for {context.participant_name}: {context.hand_cards} "
                f"(total={context.hand_total}, soft={context.is_soft}) -> "
                f"{'hit' if hit else 'stand'}"
            )
        return context

    def log_outcome(self, name: str, outcome: Outcome, player_total: int, dealer_total: int):
        """Log the result a player was given."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(
                f"{name} {outcome.value} ({player_total} vs dealer {dealer_total})"
            )

    def log_dealer_bust(self, total: int):
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(f"Dealer busts with {total}")

    def end_round(self):
        """Move this round's decisions into the history."""
        self.decision_history.extend(self.current_round_decisions)
        self.current_round_decisions = []

    def get_round_summary(self) -> Dict[str, Any]:
        """Summarise the decisions made in the current round."""
        hits = sum(1 for d in self.current_round_decisions if d.hit)
        return {
            "decisions": len(self.current_round_decisions),
            "hits": hits,
            "stands": len(self.current_round_decisions) - hits,
            "participants": sorted(
                {d.participant_name for d in self.current_round_decisions}
            ),
        }


# Global instance
decision_logger = DecisionLogger()
