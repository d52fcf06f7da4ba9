# liquidation_poa/processing/__init__.py

"""
Makes the bid handling components importable.
"""
from .bid import Bid
from .bid_book import BidBook
