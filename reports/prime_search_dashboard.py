"""Prime-search cost across bit lengths."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from statistics import mean
from typing import Dict, List, Optional, Sequence

from textbook_rsa.config import DEFAULT_CONFIG, RsaConfig
from textbook_rsa.primes import RandomBitSource, find_prime
from utils.plotting import HAS_MPL, ensure_parent, label_axes, save, side_by_side

logger = logging.getLogger(__name__)

DEFAULT_BIT_LENGTHS: Sequence[int] = (32, 64, 128, 256, 512)


@dataclass(frozen=True)
class SearchSample:
    bit_length: int
    mean_attempts: float
    expected_attempts: float
    mean_ms: float


def expected_attempts(bit_length: int) -> float:
    # Prime density among odd numbers near 2**bits is about 2 / (bits * ln 2).
    return bit_length * math.log(2) / 2


def collect_samples(
    bit_lengths: Sequence[int] = DEFAULT_BIT_LENGTHS,
    *,
    trials: int = 5,
    config: Optional[RsaConfig] = None,
    seed: Optional[int] = None,
) -> List[SearchSample]:
    """Run *trials* prime searches per bit length and average the cost."""

    config = config or DEFAULT_CONFIG
    source = RandomBitSource(seed) if seed is not None else None
    samples: List[SearchSample] = []
    for bits in bit_lengths:
        attempts: List[int] = []
        millis: List[float] = []
        for _ in range(trials):
            result = find_prime(bits, source=source, **config.search_kwargs())
            attempts.append(result.attempts)
            millis.append(result.elapsed * 1000.0)
        sample = SearchSample(bits, mean(attempts), expected_attempts(bits), mean(millis))
        logger.info(
            "%d bits: %.1f attempts (expected %.1f), %.2f ms",
            bits,
            sample.mean_attempts,
            sample.expected_attempts,
            sample.mean_ms,
        )
        samples.append(sample)
    return samples


def make_prime_search_dashboard(
    save_path: str | Path,
    samples: Optional[Sequence[SearchSample]] = None,
) -> Dict[str, object]:
    """Render attempts and timing per bit length to *save_path*.

    Returns the samples together with the written path, or ``None`` for the
    path when matplotlib is unavailable.
    """

    if samples is None:
        samples = collect_samples()
    target = ensure_parent(save_path)
    if not HAS_MPL:
        return {"samples": list(samples), "path": None}

    bits = [s.bit_length for s in samples]
    fig, axes = side_by_side(2)
    fig.suptitle("Random prime search cost")

    ax = label_axes(axes[0], "Candidates drawn", xlabel="Bit length", ylabel="Attempts")
    ax.plot(bits, [s.mean_attempts for s in samples], marker="o", label="measured (mean)")
    ax.plot(bits, [s.expected_attempts for s in samples], linestyle="--", label="bits * ln2 / 2")
    ax.legend()

    ax = label_axes(axes[1], "Search time", xlabel="Bit length", ylabel="Milliseconds")
    ax.semilogy(bits, [max(s.mean_ms, 1e-3) for s in samples], marker="s", color="#f97316")

    fig.tight_layout(rect=(0, 0, 1, 0.93))
    return {"samples": list(samples), "path": save(fig, target)}


__all__ = [
    "DEFAULT_BIT_LENGTHS",
    "SearchSample",
    "expected_attempts",
    "collect_samples",
    "make_prime_search_dashboard",
]
