"""
Cross-section and footing plan diagrams using Matplotlib.
"""

import io
import re
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle, FancyBboxPatch, Rectangle


_BAR_GROUP = re.compile(r"(\d+)\s*T\s*(\d+)", re.IGNORECASE)
_MESH = re.compile(r"T\s*(\d+)\s*@\s*(\d+)", re.IGNORECASE)


def parse_bar_callout(callout: str) -> Optional[Tuple[int, int]]:
    """'3T16 Bottom' -> (3, 16); None for 'None' or unparseable text."""
    match = _BAR_GROUP.search(callout or "")
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def parse_mesh_callout(callout: str) -> Optional[Tuple[int, int]]:
    """'T12@250' -> (12, 250)."""
    match = _MESH.search(callout or "")
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def _finish(fig, return_figure: bool):
    if return_figure:
        return fig
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()


def _bar_row(width: float, offset: float, count: int, dia: float) -> np.ndarray:
    if count == 1:
        return np.array([width / 2])
    return np.linspace(offset + dia / 2, width - offset - dia / 2, count)


def generate_cross_section(
    width: float,
    depth: float,
    cover: float,
    main_bar: str,
    top_bar: str,
    link_dia: float = 8,
    title: str = 'Cross Section',
    return_figure: bool = True,
):
    """
    Generate cross-section diagram of a rectangular RC beam.

    Args:
        width: Beam width in mm
        depth: Overall depth in mm
        cover: Nominal cover in mm
        main_bar: Bottom bar callout, e.g. "3T16 Bottom"
        top_bar: Top bar callout, e.g. "2T12 (Hangers)"
        link_dia: Link diameter in mm
        title: Figure title
        return_figure: If True, return figure; if False, return PNG bytes

    Returns:
        Matplotlib figure or PNG bytes
    """
    fig, ax = plt.subplots(1, 1, figsize=(5, 7))

    concrete = FancyBboxPatch(
        (0, 0), width, depth,
        boxstyle="round,pad=0,rounding_size=5",
        linewidth=2, edgecolor='#2c3e50', facecolor='#ecf0f1'
    )
    ax.add_patch(concrete)

    # Link (dashed rectangle inside cover)
    link = Rectangle(
        (cover, cover), width - 2 * cover, depth - 2 * cover,
        linewidth=1.5, edgecolor='#27ae60', facecolor='none', linestyle='--'
    )
    ax.add_patch(link)

    offset = cover + link_dia

    bottom = parse_bar_callout(main_bar)
    if bottom:
        count, dia = bottom
        bar_y = offset + dia / 2
        for bar_x in _bar_row(width, offset, count, dia):
            ax.add_patch(Circle((bar_x, bar_y), dia / 2,
                                facecolor='#e74c3c', edgecolor='#c0392b', linewidth=1))
        ax.text(width / 2, bar_y + dia + 10, main_bar,
                ha='center', va='bottom', fontsize=9, color='#c0392b', fontweight='bold')
    else:
        ax.text(width / 2, depth * 0.25, 'REDESIGN',
                ha='center', va='center', fontsize=11, color='#e74c3c', fontweight='bold')

    top = parse_bar_callout(top_bar)
    if top:
        count, dia = top
        top_y = depth - offset - dia / 2
        for bar_x in _bar_row(width, offset, count, dia):
            ax.add_patch(Circle((bar_x, top_y), dia / 2,
                                facecolor='#3498db', edgecolor='#2980b9', linewidth=1))
        ax.text(width / 2, top_y - dia - 10, top_bar,
                ha='center', va='top', fontsize=9, color='#2980b9', fontweight='bold')

    # Dimensions
    dim_offset = 30
    ax.annotate(
        '', xy=(0, -dim_offset), xytext=(width, -dim_offset),
        arrowprops=dict(arrowstyle='<->', color='black', lw=1)
    )
    ax.text(width / 2, -dim_offset - 15, f'{width:.0f} mm',
            ha='center', va='top', fontsize=10, fontweight='bold')
    ax.annotate(
        '', xy=(width + dim_offset, 0), xytext=(width + dim_offset, depth),
        arrowprops=dict(arrowstyle='<->', color='black', lw=1)
    )
    ax.text(width + dim_offset + 10, depth / 2, f'{depth:.0f} mm',
            ha='left', va='center', fontsize=10, fontweight='bold', rotation=90)

    margin = 80
    ax.set_xlim(-margin, width + margin)
    ax.set_ylim(-margin, depth + margin)
    ax.set_aspect('equal')
    ax.axis('off')
    ax.set_title(title, fontsize=12, fontweight='bold', pad=20)

    plt.tight_layout()
    return _finish(fig, return_figure)


def generate_footing_plan(
    side: float,
    column_dimension: float,
    mesh: str,
    return_figure: bool = True,
):
    """
    Generate plan view of a square pad footing with its bottom mesh.

    Args:
        side: Footing side in m
        column_dimension: Column size in mm
        mesh: Mesh callout, e.g. "T12@250"
        return_figure: If True, return figure; if False, return PNG bytes

    Returns:
        Matplotlib figure or PNG bytes
    """
    fig, ax = plt.subplots(1, 1, figsize=(6, 6))
    size = side * 1000

    ax.add_patch(Rectangle((0, 0), size, size,
                           linewidth=2, edgecolor='#2c3e50', facecolor='#ecf0f1'))

    parsed = parse_mesh_callout(mesh)
    if parsed:
        _, spacing = parsed
        for pos in np.arange(spacing / 2, size, spacing):
            ax.plot([pos, pos], [0, size], color='#27ae60', linewidth=0.8, alpha=0.6)
            ax.plot([0, size], [pos, pos], color='#27ae60', linewidth=0.8, alpha=0.6)

    col_origin = (size - column_dimension) / 2
    ax.add_patch(Rectangle((col_origin, col_origin), column_dimension, column_dimension,
                           linewidth=1.5, edgecolor='#2c3e50', facecolor='#95a5a6'))

    ax.annotate(
        '', xy=(0, -size * 0.06), xytext=(size, -size * 0.06),
        arrowprops=dict(arrowstyle='<->', color='black', lw=1)
    )
    ax.text(size / 2, -size * 0.09, f'{side:.1f} m',
            ha='center', va='top', fontsize=10, fontweight='bold')
    ax.text(size / 2, size * 1.04, f'{mesh} B1/B2',
            ha='center', va='bottom', fontsize=10, color='#27ae60', fontweight='bold')

    margin = size * 0.15
    ax.set_xlim(-margin, size + margin)
    ax.set_ylim(-margin, size + margin)
    ax.set_aspect('equal')
    ax.axis('off')
    ax.set_title('Footing Plan', fontsize=12, fontweight='bold', pad=10)

    plt.tight_layout()
    return _finish(fig, return_figure)
