from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection

from coauthor_map.graph import node_positions

EDGE_COLOR = (0.80, 0.15, 0.10)
MIN_WIDTH, MAX_WIDTH = 0.3, 4.0
MIN_ALPHA, MAX_ALPHA = 0.15, 0.9


def edge_styles(weights):
    """Linienbreite und Deckkraft linear im Gewicht (größtes Gewicht = Maximum)"""
    w = np.asarray(weights, dtype=float)
    if w.size == 0:
        return np.array([]), np.array([])
    scale = w / w.max()
    widths = MIN_WIDTH + (MAX_WIDTH - MIN_WIDTH) * scale
    alphas = MIN_ALPHA + (MAX_ALPHA - MIN_ALPHA) * scale
    return widths, alphas


def plot_network_map(G, basemap, out_path, communities=None, title="Co-Autorschaft zwischen Gemeinden"):
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pos = node_positions(G)

    fig, ax = plt.subplots(figsize=(16, 9))
    basemap.plot(ax=ax, color="#eeeeee", edgecolor="#999999", linewidth=0.3)

    # Kanten: schwere Kanten zuletzt, damit sie oben liegen
    edges = sorted(G.edges(data="weight"), key=lambda e: e[2])
    if edges:
        widths, alphas = edge_styles([w for _, _, w in edges])
        segments = [[pos[u], pos[v]] for u, v, _ in edges]
        colors = [(*EDGE_COLOR, a) for a in alphas]
        ax.add_collection(LineCollection(segments, linewidths=widths, colors=colors, zorder=2))

    nodes = list(G.nodes())
    xy = np.array([pos[n] for n in nodes], dtype=float).reshape(-1, 2)
    if communities is not None:
        cmap = matplotlib.colormaps["tab20"]
        node_colors = [cmap(communities[n] % cmap.N) for n in nodes]
    else:
        node_colors = "tab:blue"
    strength = dict(G.degree(weight="weight"))
    sizes = [10 + 4 * np.sqrt(strength[n]) for n in nodes]
    ax.scatter(xy[:, 0], xy[:, 1], s=sizes, c=node_colors, edgecolors="black", linewidths=0.3, zorder=3)

    ax.set_xlim(-180, 180)
    ax.set_ylim(-90, 90)
    ax.set_aspect("equal")
    ax.set_axis_off()
    ax.set_title(title)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path
