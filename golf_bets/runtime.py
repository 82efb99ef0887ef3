from __future__ import annotations

from golf_bets.repository import RoundRepository
from golf_bets.service import RoundService

repo = RoundRepository()
service = RoundService(repo)
