from pyboruvka.EuclideanMST import EuclideanMST
from typing import Any, Optional, Sequence, Tuple
from matplotlib.axes import Axes
from mpl_toolkits.mplot3d import Axes3D  # noqa
import numpy as np
import plotly.graph_objects as go


def plot_edges(
    edges: Sequence[Tuple[np.ndarray, np.ndarray]],
    ax: Axes,
    line_color: Any = "b",
    line_width: float = 1.0,
):
    """
    Draw each edge as its own line segment on a Matplotlib axis.

    Points with more than two coordinates are drawn with their first three,
    so a 3D axis is expected for them.

    Parameters
    ----------
    edges : Sequence[Tuple[np.ndarray, np.ndarray]]
        Endpoint coordinate pairs, one pair per edge.
    ax : matplotlib.axes.Axes
        A Matplotlib Axes object (2D or 3D) to draw on.
    line_color : Any, optional
        Color of the segments, by default 'b'.
    line_width : float, optional
        Width of the segments, by default 1.0.
    """
    for p1, p2 in edges:
        segment = np.vstack([p1, p2])
        dims = 3 if segment.shape[1] > 2 else 2
        ax.plot(*segment[:, :dims].T, color=line_color, linewidth=line_width)


def _padded_points(points: np.ndarray) -> np.ndarray:
    # 1D points are drawn on the x axis
    if points.shape[1] == 1:
        return np.hstack([points, np.zeros_like(points)])
    return points


def plot_spanning_tree(
    tree: EuclideanMST,
    title: str = "Minimum Spanning Tree",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    marker_size: float = 5,
    marker_color: Any = "black",
    line_width: float = 1.5,
    line_color: Any = "red",
):
    """
    Visualize a Euclidean minimum spanning tree using either Matplotlib or Plotly.

    Only the first two (or three, for 3D input) coordinates are drawn.

    Parameters
    ----------
    tree : EuclideanMST
        The spanning tree whose points and edges will be plotted.
    title : str, optional
        Title of the plot. Default is "Minimum Spanning Tree".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib axis (2D, or 3D for 3D points) to plot on. If provided,
        Matplotlib is used.
    marker_size : float, optional
        Size of the point markers. Default is 5.
    marker_color : Any, optional
        Color of the point markers. Default is "black".
    line_width : float, optional
        Width of the tree edges. Default is 1.5.
    line_color : Any, optional
        Color of the tree edges. Default is "red".

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """

    if ax is not None:
        pts = _padded_points(tree.points)
        ax.set_title(title)
        if pts.shape[1] > 2:
            ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], color=marker_color, s=marker_size**2)
        else:
            ax.scatter(pts[:, 0], pts[:, 1], color=marker_color, s=marker_size**2)
        edges = [(pts[e.source], pts[e.destination]) for e in tree.edges]
        plot_edges(edges, ax, line_color=line_color, line_width=line_width)
        return ax

    return _plot_spanning_tree_plotly(
        tree, title, fig, marker_size, marker_color, line_width, line_color
    )


def _plot_spanning_tree_plotly(
    tree: EuclideanMST,
    title: str,
    fig: Optional[go.Figure],
    marker_size: float,
    marker_color: Any,
    line_width: float,
    line_color: Any,
):
    """
    Internal helper to render a spanning tree using Plotly.

    All tree edges go into a single line trace, separated by ``None`` gaps.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """

    if fig is None:
        fig = go.Figure()

    pts = _padded_points(tree.points)
    is_3d = pts.shape[1] > 2

    xs, ys, zs = [], [], []
    for e in tree.edges:
        p1, p2 = pts[e.source], pts[e.destination]
        xs += [p1[0], p2[0], None]
        ys += [p1[1], p2[1], None]
        if is_3d:
            zs += [p1[2], p2[2], None]

    if is_3d:
        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode='lines',
            line=dict(color=line_color, width=line_width),
            name='Tree'
        ))
        fig.add_trace(go.Scatter3d(
            x=pts[:, 0], y=pts[:, 1], z=pts[:, 2],
            mode='markers',
            marker=dict(size=marker_size, color=marker_color),
            name='Points'
        ))
        fig.update_layout(scene=dict(aspectmode='data'))
    else:
        fig.add_trace(go.Scatter(
            x=xs, y=ys,
            mode='lines',
            line=dict(color=line_color, width=line_width),
            name='Tree'
        ))
        fig.add_trace(go.Scatter(
            x=pts[:, 0], y=pts[:, 1],
            mode='markers',
            marker=dict(size=marker_size, color=marker_color),
            name='Points'
        ))

    fig.update_layout(
        title=title,
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig
