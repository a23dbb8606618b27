# dataframe_basics/ingest.py
import os
from urllib.parse import urlparse

# Quarterly loan performance files are headerless and pipe-delimited
DELIMITER  = "|"
HEADER     = "false"
NULL_VALUE = ""          # empty entries are read as null
GLOB_CHARS = set("*?[{")  # Hadoop glob syntax


def quarter_filename(year, quarter):
    return f"Performance_{year}Q{quarter}.txt"


def quarter_paths(base, year, first, last):
    for q in (first, last):
        if not 1 <= q <= 4:
            raise ValueError(f"Quarter must be between 1 and 4, got {q}")
    return [f"{base.rstrip('/')}/{quarter_filename(year, q)}" for q in range(first, last + 1)]


def _default_fs(spark):
    return spark.sparkContext._jsc.hadoopConfiguration().get("fs.defaultFS") or "file:///"


def _check_exists(spark, path):
    # Only plain local paths are checked up front. Globs, object stores and
    # scheme-less paths on a non-local default filesystem go straight to Spark.
    if GLOB_CHARS & set(path):
        return
    parsed = urlparse(path)
    if parsed.scheme == "file":
        local = parsed.path
    elif parsed.scheme == "" or len(parsed.scheme) == 1:   # C:\... is a drive letter
        if not _default_fs(spark).startswith("file:"):
            return
        local = path
    else:
        return
    if not os.path.exists(local):
        raise FileNotFoundError(f"Input not found: {path}")


def read_performance(spark, path, schema=None, infer_schema=True):
    """
    Read a delimited performance file, folder of files or glob as a DataFrame.

    Column types come from `schema` when given, otherwise from Spark's
    inference when `infer_schema` is true, otherwise every column is a string.
    """
    _check_exists(spark, path)

    reader = (spark.read
                   .option("header", HEADER)
                   .option("delimiter", DELIMITER)
                   .option("nullValue", NULL_VALUE))
    if schema is not None:
        reader = reader.schema(schema)
    elif infer_schema:
        reader = reader.option("inferSchema", "true")

    return reader.csv(path)


def append_quarters(spark, df, base, year, first, last, schema=None, infer_schema=True):
    # Row-wise append, matched by column position
    for path in quarter_paths(base, year, first, last):
        quarter_df = read_performance(spark, path, schema=schema, infer_schema=infer_schema)
        df = df.union(quarter_df)
    return df
