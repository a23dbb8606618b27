# dataframe_basics/stage_sample.py
import os
import pandas as pd

from dataframe_basics import config
from dataframe_basics.ingest import DELIMITER, quarter_filename

PERIOD_COL = 1                 # monthly reporting period, MM/DD/YYYY
PERIOD_FORMAT = "%m/%d/%Y"


def split_by_quarter(src, out_dir):
    """
    Split one headerless performance file into Performance_<year>Q<n>.txt
    files under `out_dir`, so the walkthrough can run against local disk.
    """
    if not os.path.exists(src):
        raise FileNotFoundError(f"Input not found: {src}")
    os.makedirs(out_dir, exist_ok=True)

    # Keep every value as the original text, empty entries included
    df = pd.read_csv(src, sep=DELIMITER, header=None, dtype=str, keep_default_na=False)

    period = pd.to_datetime(df[PERIOD_COL], format=PERIOD_FORMAT, errors="coerce")
    dropped = int(period.isna().sum())
    if dropped:
        print(f"⚠️ Dropping {dropped} rows with an unreadable period")
    df = df[period.notna()]
    period = period[period.notna()]

    written = []
    for (year, quarter), part in df.groupby([period.dt.year, period.dt.quarter], sort=True):
        out = os.path.join(out_dir, quarter_filename(year, quarter))
        part.to_csv(out, sep=DELIMITER, header=False, index=False)
        print(f"✅ Wrote: {out}   ({len(part)} rows)")
        written.append(out)
    return written


def main():
    split_by_quarter(config.SRC, config.OUT_DIR)


if __name__ == "__main__":
    main()
