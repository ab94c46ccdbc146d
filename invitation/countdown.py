# invitation/countdown.py
# =================================================================================
# ⏳ Cuenta regresiva hasta la boda
# - `compute_breakdown`: función pura (objetivo, ahora) → días/horas/min/seg.
# - `Countdown`: guarda el último valor y deja de recalcular al llegar a cero.
# =================================================================================

from __future__ import annotations

import math
from datetime import datetime

from invitation.schemas import CountdownBreakdown

SECONDS_PER_DAY = 86400
TICK_SECONDS = 1.0                 # Intervalo del temporizador en la UI.


def compute_breakdown(target: datetime, now: datetime) -> CountdownBreakdown:
    """
    Descompone `target - now` en días, horas, minutos y segundos.
    Si la diferencia es <= 0 todo queda en cero (nunca valores negativos).
    """
    delta = (target - now).total_seconds()
    if delta <= 0:
        return CountdownBreakdown()

    total = math.floor(delta)
    days, rest = divmod(total, SECONDS_PER_DAY)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return CountdownBreakdown(days=days, hours=hours, minutes=minutes, seconds=seconds)


class Countdown:
    """Estado del contador mostrado en el hero."""

    def __init__(self, target: datetime) -> None:
        self.target = target
        self.current = CountdownBreakdown()
        self.finished = False

    def tick(self, now: datetime | None = None) -> CountdownBreakdown:
        """Recalcula si aún falta tiempo; al llegar al objetivo se fija en cero."""
        if self.finished:
            return self.current
        now = now or datetime.now(self.target.tzinfo)
        self.current = compute_breakdown(self.target, now)
        if (self.target - now).total_seconds() <= 0:
            self.finished = True
        return self.current
