"""
Make standalone interactive stacked area charts for categorical data.

When run from the command line, `stacks` reads data from a `csv` file
and creates an HTML document that displays an interactive stacked area
chart or streamgraph.

    The `stacks` command reads data from a `csv` file.  The first row
    of data defines column names.  The file should include:
        - a column of category names for an independent variable (like
          dates), plotted along the horizontal axis,
        - optionally, a column of category names for a split factor, and
        - one or more columns of data values to be stacked as areas.

    With a split factor, one stack is drawn for each split factor
    category, and a widget selects which one is visible.


Command line interface
----------------------
usage: python -m stackscape.stacks [-h] [-x X] [-b BY] [-v VALUES [VALUES ...]]
                                   [--offset OFFSET] [--order ORDER]
                                   [--curve CURVE] [-g ARGS] [-p PALETTE]
                                   [-t SAVE] [-s] [-l LOG_LEVEL]
                                   datafile

Create interactive stacked areas for data series

positional arguments:
  datafile              Name of .csv file with data series

optional arguments:
  -h, --help            show this help message and exit
  -x X                  Name of independent variable, for horizontal axis
  -b BY, --by BY        Name of factor variable for splits
  -v VALUES [VALUES ...], --values VALUES [VALUES ...]
                        Dependent variables to show as stacked areas
  --offset OFFSET       Offset policy: diverging, expand, none, silhouette,
                        wiggle
  --order ORDER         Order policy: ascending, descending, inside_out,
                        none, reverse
  --curve CURVE         Curve for band edges: linear, monotone, step
  -g ARGS, --args ARGS  Keyword arguments for stacked_areas(), specified as
                        YAML mapping
  -p PALETTE, --palette PALETTE
                        Name of color palette from bokeh.palettes
  -t SAVE, --save SAVE  Name of interactive .html to save, if different from
                        the datafile base
  -s, --show            Show interactive .html
  -l LOG_LEVEL, --log-level LOG_LEVEL
                        Logging level, like DEBUG or INFO
"""

#%%

from bokeh.layouts import layout
from bokeh.io import save, show
from bokeh.models import Select
from bokeh.models.widgets import Div

import argparse
import pandas as pd
from pathlib import Path
import sys
import yaml

## Imports from this package
from stackscape.base import (add_hover_tool, extend_legend_items,
                             set_output_file, stack_figure, variables_cmap)
from stackscape.curves import CURVES
from stackscape.stack import OFFSETS, ORDERS, calculate_extremes
from stackscape.stacks.stacks import (link_widget_to_bands, stack_frame,
                                      stacked_areas)
from stackscape.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

#%%

def _parse_args(argv=None):
    """
    Parse command line arguments

    Returns
    -------
    `argparse.Namespace` object

    Examples
    --------
    args = _parse_args(["energy.csv", "--offset", "wiggle"])
    data = pd.read_csv(args.datafile)
    """
    parser = argparse.ArgumentParser(
        prog="python -m stackscape.stacks",
        description="Create interactive stacked areas for data series"
    )
    parser.add_argument("datafile",
                        help="Name of .csv file with data series")
    parser.add_argument("-x", type=str,
                        help="Name of independent variable, for horizontal axis")
    parser.add_argument("-b", "--by", type=str,
                        help="Name of factor variable for splits")
    parser.add_argument("-v", "--values",
                        nargs="+", type=str,
                        help="Dependent variables to show as stacked areas")

    parser.add_argument("--offset", default="none", choices=sorted(OFFSETS),
                        help="Offset policy: " + ", ".join(sorted(OFFSETS)))
    parser.add_argument("--order", default="none", choices=sorted(ORDERS),
                        help="Order policy: " + ", ".join(sorted(ORDERS)))
    parser.add_argument("--curve", default="linear", choices=sorted(CURVES),
                        help="Curve for band edges: " + ", ".join(sorted(CURVES)))

    parser.add_argument("-g", "--args",
                        type=str,
                        help="Keyword arguments for stacked_areas(), specified as YAML mapping")
    parser.add_argument("-p", "--palette", type=str, default="Category10_10",
                        help="Name of color palette from bokeh.palettes")

    parser.add_argument("-t", "--save", type=str,
                        help="Name of interactive .html to save, if different from the datafile base")
    parser.add_argument("-s", "--show", action="store_true",
                        help="Show interactive .html")
    parser.add_argument("-l", "--log-level", type=str, default=None,
                        help="Logging level, like DEBUG or INFO")
    args = parser.parse_args(argv)

    # Unpack YAML args into dict of keyword args for stacked_areas().
    args.args = {} if args.args is None else yaml.safe_load(args.args)
    if not isinstance(args.args, dict):
        parser.error(f"--args must be a YAML mapping, not {args.args!r}")
    return args


def _split_frames(data, byvar):
    """Map split factor levels to subsets of data, in order of appearance"""
    if byvar is None:
        return {None: data}
    return {level: data[data[byvar] == level]
            for level in data[byvar].unique()}


def _numeric_columns(data, columns):
    """Columns whose non-missing values all parse as numbers"""
    return [column for column in columns
            if pd.to_numeric(data[column].dropna(), errors="coerce").notna().all()]


def _align_levels(frames, iv_variable):
    """
    Give every split level the same independent variable values

    Levels are reindexed on the independent variable values of all levels,
    in order of appearance.  Values missing from a level are stacked as
    zero.

    Returns
    -------
    Tuple of the list of independent variable values, and the dict of
    aligned frames.
    """
    if len(frames) == 1:
        frame, = frames.values()
        return list(frame[iv_variable]), frames

    iv_labels = list(pd.unique(pd.concat(
        [frame[iv_variable] for frame in frames.values()])))
    aligned = {}
    for level, frame in frames.items():
        if frame[iv_variable].duplicated().any():
            sys.exit(f"stacks: error: repeated {iv_variable} values in split {level!r}")
        if list(frame[iv_variable]) != iv_labels:
            logger.warning("split %r has different %s values, aligning on %s",
                           level, iv_variable, iv_labels)
            frame = (frame.set_index(iv_variable)
                     .reindex(iv_labels)
                     .reset_index())
        aligned[level] = frame
    return iv_labels, aligned


#%%

def main(argv=None):
    args = _parse_args(argv)
    configure_logging(args.log_level)
    logger.info("arguments: %s", vars(args))

    data = pd.read_csv(args.datafile, dtype=str)

    # Unpack args specifying which columns to use.  By default the first
    # column is the independent variable and the rest are data values,
    # skipping text columns.
    iv_variable = args.x or data.columns[0]
    byvar = args.by
    datavars = args.values
    if not datavars:
        candidates = [var for var in data.columns
                      if var not in (iv_variable, byvar)]
        datavars = _numeric_columns(data, candidates)
        skipped = [var for var in candidates if var not in datavars]
        if skipped:
            logger.info("skipping non-numeric columns %s", skipped)
        if not datavars:
            sys.exit(f"stacks: error: no numeric columns to stack in {args.datafile}")

    iv_labels, frames = _align_levels(_split_frames(data, byvar), iv_variable)
    results = {level: stack_frame(frame, datavars,
                                  offset=args.offset, order=args.order)
               for level, frame in frames.items()}
    logger.info("stacked %d series over %d split levels",
                len(datavars), len(results))

    title = "stacks: " + Path(args.datafile).stem
    outfile = set_output_file(args.save or args.datafile, title=title)

    # Size the vertical axis for every stack, so switching splits does
    # not rescale.
    all_bands = [band for result in results.values() for band in result.values]
    fig = stack_figure(iv_labels, calculate_extremes(all_bands),
                       x_axis_label=iv_variable)

    color_map = variables_cmap(datavars, args.palette)

    groups = []
    legend_renderers = {var: [] for var in datavars}
    for i, result in enumerate(results.values()):
        # Keyword args from the command line override the defaults.
        area_args = dict(
            curve=args.curve,
            color_map=color_map,
            legend=False,
            hover=False,
            visible=(i == 0),
        )
        area_args.update(args.args)
        renderers = stacked_areas(fig, result, **area_args)
        groups.append(list(renderers.values()))
        for label, renderer in renderers.items():
            legend_renderers[label].append(renderer)

    extend_legend_items(fig, {label: renderers
                              for label, renderers in legend_renderers.items()
                              if renderers})
    add_hover_tool(fig, [renderer for group in groups for renderer in group],
                   ("series", "$name"),
                   description="Hover stacked bands")

    rows = [Div(text="<h1>" + title)]  # Show title as level 1 heading.
    if byvar is not None:
        # Make a select widget to choose factor level.
        levels = [str(level) for level in results]
        widget = Select(options=levels, value=levels[0], title=byvar,
                        name=byvar + "_select")
        link_widget_to_bands(widget, groups)
        rows.append([widget])
    rows.append([fig])
    app = layout(rows)

    if args.show:
        show(app)  # Save file and display in web browser.
    else:
        save(app)  # Save file.
    logger.info("saved %s", outfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())
