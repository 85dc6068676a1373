from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, Sequence, Set, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
from PIL import Image

from graphics_shapes import Coord, Shape

from plotting.vectorizer import draw_shapes_on_axis, save_shapes_as_png, save_shapes_as_svg

logger = logging.getLogger(__name__)

Bounds = Tuple[int, int, int, int]


def _as_shapes(shape_or_shapes: Union[Shape, Iterable[Shape]]) -> list:
    if hasattr(shape_or_shapes, "outline_pixels"):
        return [shape_or_shapes]
    shapes = list(shape_or_shapes)
    if not shapes:
        raise ValueError("No shapes provided")
    return shapes


def pixel_bounds(pixels: Iterable[Coord]) -> Bounds:
    """
    (left, top, right, bottom), inclusive, of a non-empty pixel set.
    """
    arr = np.array([[p.x, p.y] for p in pixels], dtype=int)
    if arr.size == 0:
        raise ValueError("Cannot compute bounds of an empty pixel set")
    (left, top), (right, bottom) = arr.min(axis=0), arr.max(axis=0)
    return int(left), int(top), int(right), int(bottom)


def pixels_to_mask(pixels: Set[Coord], bounds: Optional[Bounds] = None) -> Tuple[np.ndarray, Coord]:
    """
    Boolean image (rows = y) of the pixel set and the Coord of mask[0, 0].
    Pixels outside `bounds` are dropped.
    """
    if bounds is None:
        bounds = pixel_bounds(pixels)
    left, top, right, bottom = bounds
    mask = np.zeros((bottom - top + 1, right - left + 1), dtype=bool)
    if pixels:
        arr = np.array([[p.x, p.y] for p in pixels], dtype=int)
        keep = (arr[:, 0] >= left) & (arr[:, 0] <= right) & (arr[:, 1] >= top) & (arr[:, 1] <= bottom)
        arr = arr[keep]
        mask[arr[:, 1] - top, arr[:, 0] - left] = True
    return mask, Coord(left, top)


def render_pixels(
    shapes: Union[Shape, Iterable[Shape]],
    size: Optional[Tuple[int, int]] = None,
    line_width: int = 1,
    fill: bool = True,
    colors: Optional[Sequence[Sequence[float]]] = None,
    background: Tuple[int, int, int] = (255, 255, 255),
) -> Image.Image:
    """
    Paints each shape's filled pixels (lightened) then its outline into an
    RGB image. With `size` the canvas spans (0, 0) .. size - 1, otherwise
    it is fitted to the shapes.
    """
    image, _ = _render(_as_shapes(shapes), size, line_width, fill, colors, background)
    return image


def _render(shapes, size, line_width, fill, colors, background) -> Tuple[Image.Image, Bounds]:
    cmap = plt.get_cmap("tab10")
    layers = []
    for idx, shape in enumerate(shapes):
        rgb = np.array(colors[idx] if colors is not None else cmap(idx % 10)[:3], dtype=float).reshape(-1)[:3]
        outline = shape.outline_pixels(line_width)
        filled = shape.filled_pixels() if fill else set()
        layers.append((rgb, filled, outline))

    if size is None:
        every = set().union(*(f | o for _, f, o in layers))
        bounds = pixel_bounds(every)
    else:
        bounds = (0, 0, size[0] - 1, size[1] - 1)

    left, top, right, bottom = bounds
    canvas = np.empty((bottom - top + 1, right - left + 1, 3), dtype=float)
    canvas[:, :] = np.array(background, dtype=float) / 255.0
    for rgb, filled, outline in layers:
        if filled:
            mask, _ = pixels_to_mask(filled, bounds)
            canvas[mask] = 0.6 * canvas[mask] + 0.4 * rgb
        mask, _ = pixels_to_mask(outline, bounds)
        canvas[mask] = rgb
    return Image.fromarray((np.clip(canvas, 0.0, 1.0) * 255).astype(np.uint8)), bounds


def render_to_axes(
    ax,
    shape: Union[Shape, Iterable[Shape]],
    line_width: int = 1,
    fill: bool = True,
    title: Optional[str] = None,
    draw_vector: bool = False,
    interpolation: str = "none",
    show_axes: bool = False,
    show_grid: bool = False,
) -> None:
    """
    Shows the rasterized pixels with imshow, one image pixel per pixel
    coordinate. `draw_vector` overlays the exact outlines.
    """
    shapes = _as_shapes(shape)
    img, (left, top, right, bottom) = _render(shapes, None, line_width, fill, None, (255, 255, 255))
    ax.imshow(
        np.asarray(img),
        extent=(left - 0.5, right + 0.5, bottom + 0.5, top - 0.5),
        interpolation=interpolation,
        aspect="equal",
    )
    if draw_vector:
        draw_shapes_on_axis(ax, shapes, margin=0.5)
        ax.set_xlim(left - 0.5, right + 0.5)
        ax.set_ylim(bottom + 0.5, top - 0.5)
    if title:
        ax.set_title(title)
    if show_axes:
        ax.grid(show_grid, alpha=0.2, linestyle="--")
    else:
        ax.axis("off")


def render_to_file(
    shapes: Union[Shape, Iterable[Shape]],
    out_path: str,
    line_width: int = 1,
    fill: bool = True,
    figsize: Tuple[float, float] = (6.0, 6.0),
    title: Optional[str] = None,
    dpi: int = 220,
    format: Optional[str] = None,
    resolution: int = 600,
) -> None:
    """
    "svg" and "vector" write the exact vector drawing, "raw" writes the pixel
    image at one image pixel per coordinate, anything else a matplotlib
    figure of the pixels.
    """
    shapes = _as_shapes(shapes)
    fmt = format or ("svg" if out_path.endswith(".svg") else "png")
    if fmt == "svg":
        save_shapes_as_svg(shapes, filename=out_path)
    elif fmt == "vector":
        save_shapes_as_png(shapes, filename=out_path, resolution=resolution)
    elif fmt == "raw":
        render_pixels(shapes, line_width=line_width, fill=fill).save(out_path, format="PNG")
    else:
        fig, ax = plt.subplots(1, 1, figsize=figsize, constrained_layout=True)
        render_to_axes(ax, shapes, line_width=line_width, fill=fill, title=title)
        fig.savefig(out_path, dpi=dpi, format=fmt)
        plt.close(fig)
    logger.info("Wrote %s", out_path)


def render_shape_grid(
    shapes: Sequence[Shape],
    out_path: str,
    cols: int = 4,
    line_width: int = 1,
    titles: Optional[Sequence[str]] = None,
    figsize_per_cell: Tuple[float, float] = (3.0, 3.0),
    draw_vector: bool = False,
) -> None:
    """
    One cell per shape, titled with its index (or the given title).
    """
    n = len(shapes)
    cols = max(1, cols)
    rows = max(1, (n + cols - 1) // cols)
    fig_w = figsize_per_cell[0] * cols
    fig_h = figsize_per_cell[1] * rows

    fig, axes = plt.subplots(rows, cols, figsize=(fig_w, fig_h), constrained_layout=True, squeeze=False)
    fig.patch.set_facecolor("white")

    for idx, shape in enumerate(shapes):
        ax = axes[idx // cols, idx % cols]
        title = titles[idx] if titles is not None else f"{idx}"
        render_to_axes(ax, shape, line_width=line_width, title=title, draw_vector=draw_vector)

    for idx in range(n, rows * cols):
        axes[idx // cols, idx % cols].axis("off")

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fmt = "svg" if out_path.endswith(".svg") else "png"
    fig.savefig(out_path, dpi=200, format=fmt, transparent=False, facecolor="white")
    plt.close(fig)
    logger.info("Wrote %s", out_path)
