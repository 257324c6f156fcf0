"""USD-M futures endpoint wrappers."""

from .account import FuturesAccount
from .general import FuturesGeneral
from .market import FuturesMarket
from .userstream import FuturesUserStream

__all__ = [
    "FuturesAccount",
    "FuturesGeneral",
    "FuturesMarket",
    "FuturesUserStream",
]
