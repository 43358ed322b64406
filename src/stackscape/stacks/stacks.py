"""
Make standalone interactive stacked area charts for categorical data


Functions
---------
link_widget_to_bands
    Show one group of band renderers at a time, chosen by a widget

stack_frame
    Stack columns of a dataframe

stacked_areas
    Add to a Figure one filled patch per stacked band
"""

#%%

from bokeh.models import CustomJS

## Imports from this package
from stackscape.base import add_hover_tool, extend_legend_items, variables_cmap
from stackscape.curves import get_curve
from stackscape.dutils import series_from_frame
from stackscape.scale import LinearScale
from stackscape.stack import stack, to_area
from stackscape.utils.logging import get_logger

logger = get_logger(__name__)

#%%

def stack_frame(data, columns, offset="none", order="none"):
    """
    Stack columns of a dataframe

    Parameters
    ----------
    data : DataFrame
        One row per sample, in plotting order.
    columns : list of str
        Numeric columns to stack, one band per column.
    offset : str or Offset, default "none"
        Offset policy or its name.
    order : str or Order, default "none"
        Order policy or its name.

    Returns
    -------
    StackResult, with column names as labels.

    Examples
    --------
    df = pd.DataFrame({"year": ["2001", "2002"],
                       "coal": [10, 8], "wind": [1, 3]})
    stack_frame(df, ["coal", "wind"]).values
    # [[(0.0, 10.0), (0.0, 8.0)], [(10.0, 11.0), (8.0, 11.0)]]
    """
    return stack(offset, order, series_from_frame(data, columns))


def stacked_areas(
    fig,
    result,
    curve="linear",
    color_map=None,
    palette="Category10_10",
    alpha=0.6,
    samples=8,
    legend=True,
    hover=True,
    **kwargs
):
    """
    Add to a Figure one filled patch per stacked band

    Samples are placed at horizontal positions 0, 1, 2, ..., matching
    the axis made by `stack_figure()`.

    Parameters
    ----------
    fig : Bokeh Figure
        Figure to draw on.
    result : StackResult
        Stacked bands, e.g. from `stack_frame()`.
    curve : str or callable, default "linear"
        Curve function, or its name in `stackscape.curves.CURVES`.
    color_map : dict, optional
        Map of band labels to colors.  Defaults to colors from `palette`.
    palette : str or sequence, default "Category10_10"
        Bokeh palette name or list of colors, used if `color_map` is
        not given.
    alpha : float, default 0.6
        Fill alpha of the patches.
    samples : int, default 8
        Points per curve segment when flattening smooth curves.
    legend : bool, default True
        Add a legend item for each band.
    hover : bool, default True
        Add a hover tool showing the band label.
    kwargs : mapping, optional
        Passed to each `fig.patch()` call (e.g. `visible=False`).

    Returns
    -------
    dict mapping band labels to patch renderers.
    """
    if isinstance(curve, str):
        curve = get_curve(curve)
    if color_map is None:
        color_map = variables_cmap([str(label) for label in result.labels],
                                   palette)

    renderers = {}
    for label, band in result.bands():
        # Identity y scale, since Bokeh maps data to screen.
        scales = (LinearScale(range=(0, len(band) - 1)), LinearScale())
        path = to_area(curve, scales, band)
        if not len(path):
            logger.debug("skipping empty band %r", label)
            continue

        xs, ys = path.to_polygons(samples=samples)[0]
        color = color_map[str(label)]
        renderers[label] = fig.patch(
            x=xs, y=ys,
            fill_color=color,
            fill_alpha=alpha,
            line_color=color,
            name=str(label),
            **kwargs
        )

    if legend and renderers:
        extend_legend_items(fig, renderers)
    if hover and renderers:
        add_hover_tool(fig, list(renderers.values()),
                       ("series", "$name"),
                       description="Hover stacked bands")

    return renderers


def link_widget_to_bands(widget, groups):
    """
    Attach callback to selection widget, to show one group of bands

    When the widget `value` changes, the renderers of the group at the
    same position as the value among the widget's options become visible,
    and all other renderers are hidden.

    Parameters
    ----------
    widget : Bokeh Select or similar
        Object with `options`, `value` and `js_on_change()`.
    groups : list of list of renderers
        One list of renderers per widget option.
    """

    assert len(groups) == len(widget.options), \
        f"Expected {len(widget.options)} groups of renderers, not {len(groups)}"

    # Flatten, remembering which option each renderer belongs to.
    glyphs = [renderer for group in groups for renderer in group]
    group_index = [i for i, group in enumerate(groups) for _ in group]

    widget.js_on_change(
        "value",
        CustomJS(
            args={"glyphs": glyphs, "group_index": group_index},
            code="""
                const selected = this.options.indexOf(this.value);
                for (let i = 0; i < glyphs.length; i++) {
                    glyphs[i].visible = (group_index[i] == selected);
                }
            """
        )
    )
