from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

HAS_MPL = False
plt = None  # type: ignore[assignment]

try:  # pragma: no cover - optional dependency
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    HAS_MPL = True
except Exception:  # pragma: no cover - optional dependency missing
    plt = None  # type: ignore[assignment]


def ensure_parent(pathlike) -> Path:
    """Create the parent directory of *pathlike* and return it as a Path."""
    target = Path(pathlike)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def side_by_side(cols: int = 2, *, height: float = 4.5):
    """Return ``(fig, axes)`` with *cols* panels in one row."""
    fig, axes = plt.subplots(1, cols, figsize=figure_size(cols, height), squeeze=False)
    return fig, axes[0]


def label_axes(ax, title: str, xlabel: Optional[str] = None, ylabel: Optional[str] = None):
    """Title, axis labels and a light grid."""
    ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    return ax


def save(fig, path) -> Path:
    """Write *fig* to *path* as PNG and release it."""
    target = ensure_parent(path)
    fig.savefig(str(target), bbox_inches="tight")
    plt.close(fig)
    return target


def figure_size(cols: int, height: float = 4.5) -> Tuple[float, float]:
    return cols * 6.0, height


__all__ = ["HAS_MPL", "ensure_parent", "side_by_side", "label_axes", "save", "figure_size"]
