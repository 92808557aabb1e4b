from __future__ import annotations

from .prime_search_dashboard import collect_samples, make_prime_search_dashboard

__all__ = ["collect_samples", "make_prime_search_dashboard"]
