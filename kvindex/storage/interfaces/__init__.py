"""
Interfaces for the storage system.

The index code only talks to the store through StoreGateway, so any
key-value backend can sit underneath it.
"""

from .store_gateway import StoreGateway, HASH_KEY, RANGE_KEY

__all__ = ['StoreGateway', 'HASH_KEY', 'RANGE_KEY']
