"""
multistl CLI entrypoint: decompose a CSV time series into trend, one
seasonal component per period, and residuals.
"""

import sys

import click  # type: ignore
import pandas as pd
from click import echo

from multistl.analytics.errors import MSTLError
from multistl.analytics.timeseries import TimeSeries, decomp_to_long
from multistl.core.config import ConfigManager, ConfigValidationError
from multistl.core.logger import Logger

logger = Logger.get_logger(__name__)


@click.group()
def cli():
    """multistl: multiple seasonal-trend decomposition toolkit."""
    Logger.setup()


@cli.command()
@click.argument("input_csv", type=click.Path(exists=True))
@click.option(
    "--period",
    "-p",
    "periods",
    type=int,
    multiple=True,
    help="Seasonal period in observations; repeat for several (e.g. -p 24 -p 168)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="YAML/TOML/JSON file with periods, STL options and column names",
)
@click.option("--value-col", "-v", default=None, help="Column holding the series")
@click.option("--date-col", "-d", default=None, help="Column holding the timestamps")
@click.option(
    "--fill/--no-fill",
    default=True,
    help="Interpolate missing values before decomposing (default: True)",
)
@click.option(
    "--long/--wide",
    "long_format",
    default=False,
    help="Write date/stat/value rows instead of one column per component",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default="decomposition.csv",
    help="Output CSV path",
)
def decompose(
    input_csv, periods, config_path, value_col, date_col, fill, long_format, output
):
    """
    Decompose the series in INPUT_CSV and write its components to CSV.
    """
    try:
        cfg = ConfigManager(config_path)
        period_list = list(periods) or cfg.get_periods()
        stl_params = cfg.get_stl_params()

        logger.info("Loading %s", input_csv)
        df = pd.read_csv(input_csv)
        ts = TimeSeries.from_dataframe(
            df,
            value_col=value_col or cfg.get_value_col(),
            date_col=date_col or cfg.get_date_col(),
        )
        if fill:
            ts = ts.fill_gaps(method=cfg.get_fill_method())

        requested = list(period_list)
        logger.info("Decomposing %d observations with periods %s", len(ts.df), requested)
        result = ts.decompose(period_list, stl_params=stl_params)
    except (MSTLError, ConfigValidationError) as e:
        echo(f"❌  Decomposition failed: {e}", err=True)
        sys.exit(1)

    skipped = sorted(set(requested) - set(result.periods))
    if skipped:
        echo(f"⚠️  Skipped periods longer than half the series: {skipped}")

    out_df = decomp_to_long(ts, result) if long_format else ts.to_wide(result)
    out_df.to_csv(output, index=False)
    logger.info("Decomposition saved to %s", output)
    echo(f"✅  Decomposition saved to {output}")
