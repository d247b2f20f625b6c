"""Quote Service"""
import random
from typing import List, Optional

from app.data.quotes import QUOTES
from app.models.mood import Quote


class QuoteService:
    def __init__(self, quotes: Optional[List[Quote]] = None, rng: Optional[random.Random] = None):
        self.quotes = quotes if quotes is not None else QUOTES
        self._rng = rng or random.Random()

    def random_quote(self) -> Quote:
        return self._rng.choice(self.quotes)
