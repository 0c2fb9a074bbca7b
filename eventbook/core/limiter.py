# eventbook/core/limiter.py
"""
Shared slowapi limiter.

Kept out of ``main`` to avoid a circular import. Throttles the public
``POST /confirm/{token}`` route per client address at ``CONFIRM_RATE_LIMIT``.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
