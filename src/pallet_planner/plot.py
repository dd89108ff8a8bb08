"""Top-view diagrams of a pallet's layers.

Only reads finished ``Pallet`` records; nothing in the planner depends on it.
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .constants import FOOTPRINT  # noqa: E402
from .models import Pallet  # noqa: E402

# Column/row of each snake coordinate on the 2 x 3 footprint.
SLOT_GRID: dict[str, tuple[int, int]] = {
    "a1": (0, 0),
    "a2": (0, 1),
    "a3": (0, 2),
    "b3": (1, 2),
    "b2": (1, 1),
    "b1": (1, 0),
}


def plot_pallet_layers(pallet: Pallet, *, cols: int = 3):
    """Return a figure with one subplot per layer."""
    layer_count = max(pallet.layers, 1)
    cols = max(1, min(cols, layer_count))
    rows = (layer_count + cols - 1) // cols
    fig = plt.Figure(figsize=(3.2 * cols, 3.8 * rows))
    axes = fig.subplots(rows, cols, squeeze=False)

    width, length = FOOTPRINT
    cell_w = width / 2
    cell_l = length / 3
    labels = sorted({slot.label for layer in pallet.layer_layout for slot in layer})
    cmap = matplotlib.colormaps["tab20"]
    colors = {label: cmap(i % 20) for i, label in enumerate(labels)}

    for index, ax in enumerate(axes.flat):
        ax.set_aspect("equal")
        ax.set_xlim(0, width)
        ax.set_ylim(0, length)
        ax.set_xticks([])
        ax.set_yticks([])
        if index >= len(pallet.layer_layout):
            ax.axis("off")
            continue
        ax.add_patch(plt.Rectangle((0, 0), width, length, fill=False, edgecolor="black"))
        for slot in pallet.layer_layout[index]:
            col, row = SLOT_GRID[slot.coordinate]
            x0, y0 = col * cell_w, row * cell_l
            ax.add_patch(
                plt.Rectangle(
                    (x0, y0),
                    cell_w,
                    cell_l,
                    fill=True,
                    facecolor=colors[slot.label],
                    edgecolor="black",
                    alpha=0.6,
                )
            )
            ax.text(
                x0 + cell_w / 2,
                y0 + cell_l / 2,
                f"{slot.coordinate}\n{slot.label}",
                ha="center",
                va="center",
                fontsize=7,
            )
        ax.set_title(f"Layer {index + 1}", fontsize=9)

    fig.suptitle(f"Pallet {pallet.pallet_number} ({pallet.dims}, {pallet.estimated_weight} lbs)")
    fig.tight_layout()
    return fig


def save_pallet_plot(pallet: Pallet, path: str) -> str:
    fig = plot_pallet_layers(pallet)
    fig.savefig(path)
    return path
