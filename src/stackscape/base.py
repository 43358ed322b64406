"""
base
----
Miscellaneous helpers for interactive stacked charts

Functions
---------
add_hover_tool
    Create a hover tool and add it to a Bokeh figure

extend_legend_items
    Create legend items and add to a Bokeh figure's legend

set_output_file
    Set Bokeh output file for standalone application

stack_figure
    Create a Bokeh Figure sized for stacked bands over categories

variables_cmap
    Map variable names to colors
"""

#%%

from bokeh import palettes
from bokeh.io import output_file
from bokeh.models import HoverTool, Legend, LegendItem, Range1d
from bokeh.plotting import figure

from pathlib import Path

# Imports from this package.
from stackscape.dutils import dict_fill

#%%

def add_hover_tool(fig, renderers, *tooltips, simplify=True, **kwargs):
    """
    Add a hover tool to a Bokeh figure, for given renderers

    Parameters
    ----------
    fig : Bokeh Figure
        Figure to add hover tool to.
    renderers : list
        Renderers that should trigger the hover tool.
    tooltips : list or dict
        Positional arguments should be (label, value) tuples for a
        tabular hover tool.
    simplify : bool, default True
        Suppress the label of a single (label, value) tooltip, so the
        hover tool shows just the formatted value.
    kwargs : mapping, optional
        Additional keyword arguments are passed to `HoverTool()`.
    """

    tooltips = list(tooltips)
    if len(tooltips) == 1 and simplify:
        # Just use the tooltip string without a tabular label.
        _, tooltips = tooltips[0]

    hover_tool = HoverTool(
        tooltips=tooltips,
        renderers=renderers,
        **kwargs
    )

    fig.add_tools(hover_tool)
    return hover_tool


def extend_legend_items(fig, renderers=None, items=None):
    """
    Add legend items to figure

    Parameters
    ----------
    fig : Bokeh Figure
        Figure with a legend, as made by `stack_figure()`.
    renderers : mapping
        Mapping of labels to renderers, to create `LegendItem`
        objects.  Each value should be a renderer or list of renderers.
    items : list of LegendItem
        Will be added to the figure's legend items.  Takes precedence
        over `renderers`.

    Raises
    ------
    ValueError
        If neither renderers nor items is given.
    """

    if renderers is None and items is None:
        raise ValueError("either renderers or items required")

    if items is None:
        items = [
            LegendItem(
                label=str(label),
                renderers=renderer if isinstance(renderer, list) else [renderer],
            )
            for label, renderer in renderers.items()
        ]

    fig.legend.items.extend(items)


def set_output_file(outfile, title):
    """
    Set Bokeh output file for standalone application

    Filename suffix is coerced to 'html'

    Examples
    --------
    set_output_file(args.save or args.datafile, "Energy by source")
    """

    outfile = Path(outfile).with_suffix(".html").as_posix()
    output_file(outfile, title=title, mode='inline')
    return outfile


def stack_figure(
    iv_labels,
    extent,
    legend="default",
    legend_place="right",
    **kwargs
):
    """
    Make empty Bokeh Figure for stacked bands over categories

    Samples are placed at horizontal positions 0, 1, 2, ..., and the
    horizontal axis is labelled with `iv_labels`.

    Parameters
    ----------
    iv_labels : sequence of str
        Category labels for the independent variable, one per sample.
    extent : (float, float)
        Vertical data extent, typically from `calculate_extremes()`.
    legend : Legend, "default", or None
        Legend to add to the figure.  `None` means no legend.
    legend_place : str, default "right"
        Where to place the legend.
    kwargs : mapping, optional
        Override default figure options.

    Returns
    -------
    Bokeh `Figure`.
    """

    iv_labels = [str(label) for label in iv_labels]
    last_x = max(len(iv_labels) - 1, 1)
    low, high = extent
    if low == high:
        high = low + 1

    fopts = dict(
        background_fill_color = "#fafafa",
        tools = "reset,save,pan,box_zoom,wheel_zoom",
        x_range = Range1d(0, last_x),
        y_range = Range1d(low, high),
    )
    fopts.update(kwargs)
    fig = figure(**fopts)

    fig.xaxis.ticker = list(range(len(iv_labels)))
    fig.xaxis.major_label_overrides = dict(enumerate(iv_labels))

    if legend is not None:
        if legend == "default":
            legend = Legend(
                location = "top_left",
                background_fill_alpha = 0.0)  # Transparent.
        fig.add_layout(legend, place=legend_place)

    fig.toolbar.logo = None

    return fig


def variables_cmap(variables, palette):
    """
    Map variables to colors

    If there are more variables than colors in the palette,
    colors are recycled.

    Parameters
    ----------
    variables: str or list[str]
        Variable name or list of names.
    palette: str or array
        Named palette from Bokeh.palettes, or array of colors.

    Returns
    -------
    dict mapping variable names to colors.
    """

    if isinstance(variables, str):
        # Wrap simple string in a list, for convenience.
        variables = [variables]
    n_data_series = len(variables)

    if isinstance(palette, str):
        # Access named palette from bokeh.palettes.
        palette = getattr(palettes, palette)

    if isinstance(palette, dict):
        # Pick palette by number of colors needed, else the largest one.
        largest = palette[max(palette)]
        palette = palette.get(n_data_series, largest)

    # Map variables to palette colors, recycling colors as needed.
    color_map = dict_fill(keys=variables, values=palette)
    return color_map
