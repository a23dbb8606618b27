# dataframe_basics/walkthrough.py
"""
From delimited text to a Spark DataFrame and back out to storage:
- Read a quarter of loan performance data and append further quarters
- Subset and rename columns
- Look at dimensions, rows, dtypes and the schema
- Cast a column and cast it back
- Export as partitioned parquet and csv, read each back, compare dimensions
"""
from dataframe_basics import config
from dataframe_basics.columns import OLD_COLNAMES, NEW_COLNAMES, limit_and_rename, rename_columns
from dataframe_basics.diagnostics import (
    dims, show_dims, show_columns, show_head, show_structure, show_schema
)
from dataframe_basics.export import write_frame, read_back, dimensions_match
from dataframe_basics.ingest import read_performance, append_quarters, quarter_paths
from dataframe_basics.schema import cast_column, generic_schema
from dataframe_basics.session import create_spark_session


def banner(title):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def run(spark, base=None, year=None, first=None, last=None,
        out_parquet=None, out_csv=None, mode=None):
    base = base or config.DATA_BASE
    year = year or config.PERF_YEAR
    first = config.FIRST_QUARTER if first is None else first
    last = config.LAST_QUARTER if last is None else last
    out_parquet = out_parquet or config.OUT_PARQUET
    out_csv = out_csv or config.OUT_CSV
    mode = mode or config.WRITE_MODE

    # -----------------------------
    # (1) Load a csv file
    # -----------------------------
    banner("(1) Load a csv file into a DataFrame")
    q1_path = quarter_paths(base, year, 1, 1)[0]
    perf = read_performance(spark, q1_path)
    show_dims("Q1", perf)

    perf = append_quarters(spark, perf, base, year, first, last)
    show_dims(f"Q1 + Q{first}..Q{last}", perf)

    # -----------------------------
    # (2) Rename columns
    # -----------------------------
    banner("(2) Rename DataFrame columns")
    perf_lim = limit_and_rename(perf)
    show_columns(perf_lim)
    show_head(perf_lim, num=5)
    show_structure(perf_lim)

    # -----------------------------
    # (3) Data types & schema
    # -----------------------------
    banner("(3) Data types & schema")
    show_schema(perf_lim)

    # loan_id is inferred as long; cast to string and back again
    perf_lim = cast_column(perf_lim, "loan_id", "string")
    perf_lim.printSchema()
    perf_lim = cast_column(perf_lim, "loan_id", "long")
    perf_lim.printSchema()

    # -----------------------------
    # (4) Export to storage
    # -----------------------------
    banner("(4) Export DataFrame as partitioned files")
    dim1 = dims(perf_lim)

    write_frame(perf_lim, out_parquet, fmt="parquet", mode=mode)
    dat = read_back(spark, out_parquet, fmt="parquet")
    parquet_ok = dimensions_match(dim1, dims(dat))

    # an empty export gives csv inference nothing to work with
    csv_schema = generic_schema(perf_lim.schema) if dim1[0] == 0 else None
    write_frame(perf_lim, out_csv, fmt="csv", mode=mode)
    dat2 = read_back(spark, out_csv, fmt="csv", schema=csv_schema)
    csv_ok = dimensions_match(dim1, dims(dat2))

    # csv keeps no header; restore names with the same mapping as step (2)
    print(f"Columns read back from csv: {dat2.columns}")
    dat2 = rename_columns(dat2, OLD_COLNAMES, NEW_COLNAMES)
    show_columns(dat2)

    return parquet_ok and csv_ok


def main():
    spark = create_spark_session("DataFrameBasics")
    try:
        run(spark)
    finally:
        spark.stop()


if __name__ == "__main__":
    main()
