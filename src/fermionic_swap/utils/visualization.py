"""
Swap Network Visualization
==========================

Key Functions
-------------
- orbital_trajectories(): position of every orbital after each swap layer
- plot_swap_network(): world-line plot of orbitals moving through the network
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..ordering import apply_swap_layer, validate_ordering


def orbital_trajectories(
    swap_network: Sequence[Sequence[Tuple[int, int]]],
    start_order: Sequence[int],
) -> Dict[int, np.ndarray]:
    """
    Track the position of each orbital through the network.

    Returns
    -------
    dict
        ``{orbital: positions}`` where ``positions[k]`` is the position after
        ``k`` swap layers (``positions[0]`` is the start position).
    """
    order = validate_ordering(start_order).tolist()
    history = [order]
    for layer in swap_network:
        order = apply_swap_layer(order, layer)
        history.append(order)

    trajectories = {orbital: np.empty(len(history), dtype=int) for orbital in order}
    for step, ordering in enumerate(history):
        for position, orbital in enumerate(ordering):
            trajectories[orbital][step] = position
    return trajectories


def plot_swap_network(
    swap_network: Sequence[Sequence[Tuple[int, int]]],
    start_order: Sequence[int],
    operator_network: Optional[Sequence[Sequence]] = None,
    ax: Optional[plt.Axes] = None,
    title: Optional[str] = None,
    figsize: Tuple[float, float] = (8, 5),
    cmap: str = "tab10",
) -> plt.Axes:
    """
    Plot orbital world-lines through a swap network.

    Parameters
    ----------
    swap_network : list of list of (int, int)
        Swap layers, in order.
    start_order : sequence of int
        Position-indexed orbital indices before the first layer.
    operator_network : list of layers, optional
        If given, the number of terms scheduled at each boundary is written
        above the plot.
    ax : plt.Axes, optional
        Axes to plot on. If None, creates new figure.
    title : str, optional
        Plot title. Auto-generated if None.
    figsize : tuple
        Figure size (width, height) in inches
    cmap : str
        Matplotlib colormap name

    Returns
    -------
    plt.Axes
        The axes with the plot
    """
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    trajectories = orbital_trajectories(swap_network, start_order)
    colors = plt.get_cmap(cmap)
    steps = np.arange(len(swap_network) + 1)

    for k, (orbital, positions) in enumerate(sorted(trajectories.items())):
        ax.plot(steps, positions, marker="o", color=colors(k % colors.N), label=f"orbital {orbital}")

    if operator_network is not None:
        for step, layer in enumerate(operator_network):
            ax.annotate(
                str(len(layer)),
                xy=(step, 1.0),
                xycoords=("data", "axes fraction"),
                ha="center",
                va="bottom",
                fontsize=8,
            )

    ax.set_xlabel("Swap layers applied")
    ax.set_ylabel("Position")
    ax.set_xticks(steps)
    ax.set_yticks(np.arange(len(trajectories)))
    ax.invert_yaxis()
    ax.set_title(title or f"Swap network: {len(trajectories)} orbitals, {len(swap_network)} layers")
    if trajectories:
        ax.legend(loc="center left", bbox_to_anchor=(1.0, 0.5), fontsize=8)
    return ax
