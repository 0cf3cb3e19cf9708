from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # headless-safe for servers/CI
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from luxplan.models.layout import LayoutPlan


def plot_layout(
    plan: LayoutPlan,
    length: float,
    width: float,
    outpath: Path,
    title: Optional[str] = None,
) -> Path:
    """
    Save a plan view of the room outline with one marker per luminaire.
    Length runs along x, width along y; both in meters.
    """
    outpath = Path(outpath)
    outpath.parent.mkdir(parents=True, exist_ok=True)

    pts = plan.positions()
    fig = plt.figure()
    ax = fig.add_subplot(111)
    ax.add_patch(Rectangle((0.0, 0.0), length, width, fill=False, linewidth=1.5))
    if pts:
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        ax.scatter(xs, ys, marker="o", s=60, zorder=3)

    ax.set_xlim(-0.05 * length, 1.05 * length)
    ax.set_ylim(-0.05 * width, 1.05 * width)
    ax.set_aspect("equal")
    ax.invert_yaxis()
    ax.set_xlabel("Length (m)")
    ax.set_ylabel("Width (m)")
    ax.set_title(title or plan.description)
    fig.tight_layout()
    fig.savefig(outpath, dpi=200)
    plt.close(fig)
    return outpath
