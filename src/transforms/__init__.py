"""Transaction transforms.

This module validates, orders and liquidity-filters sale transactions.
It prepares the input sequence for chain index construction.
"""
