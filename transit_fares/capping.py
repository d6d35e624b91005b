"""
Fare Capping

Running totals and sticky cap flags for one week or one day, plus the
cap cascade applied to every journey.

Processing order per journey (first match wins):
    1. week or day cap already reached  -> 0
    2. weekly cap exceeded              -> remainder up to weekly cap
    3. weekly cap hit exactly           -> 0
    4. daily cap exceeded               -> remainder up to daily cap
    5. daily cap hit exactly            -> 0
    6. otherwise                        -> base fare
"""

from dataclasses import dataclass


@dataclass(slots=True)
class CapState:
    """Running total against a cap. Once reached, stays reached."""
    cap: int
    total: int = 0
    reached: bool = False

    def add(self, amount: int) -> None:
        """Advance the running total, never past the cap."""
        self.total = min(self.cap, self.total + amount)


def apply_caps(fare: int, week: CapState, day: CapState) -> int:
    """
    Apply the weekly-then-daily cap cascade to a base fare.

    Mutates both states: flags are set when a cap is hit and totals are
    advanced by the charged amount.

    Returns:
        Amount actually charged for the journey
    """
    if week.reached or day.reached:
        charged = 0
    elif week.total + fare > week.cap:
        charged = week.cap - week.total
        week.reached = True
    elif week.total + fare == week.cap:
        # The journey that lands exactly on the cap is free
        charged = 0
        week.reached = True
    elif day.total + fare > day.cap:
        charged = day.cap - day.total
        day.reached = True
    elif day.total + fare == day.cap:
        charged = 0
        day.reached = True
    else:
        charged = fare

    day.add(charged)
    week.add(charged)
    return charged
