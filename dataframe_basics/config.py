# dataframe_basics/config.py
import os

# Set these via environment variables in the command line, e.g.
#   DATA_BASE=./data/perf FIRST_QUARTER=2 LAST_QUARTER=4 python -m dataframe_basics.walkthrough
SPARK_HOME_DEFAULT = os.environ.get("SPARK_HOME_DEFAULT", "/home/spark")
SPARK_MASTER       = os.environ.get("SPARK_MASTER")          # None -> Spark decides
SPARK_LOG_LEVEL    = os.environ.get("SPARK_LOG_LEVEL", "WARN")

DATA_BASE     = os.environ.get("DATA_BASE", "s3://sparkr-tutorials")
PERF_YEAR     = int(os.environ.get("PERF_YEAR", "2000"))
FIRST_QUARTER = int(os.environ.get("FIRST_QUARTER", "2"))    # quarters appended after Q1
LAST_QUARTER  = int(os.environ.get("LAST_QUARTER", "2"))

OUT_PARQUET = os.environ.get("OUT_PARQUET", f"{DATA_BASE}/hfpc_ex")
OUT_CSV     = os.environ.get("OUT_CSV", f"{DATA_BASE}/hfpc_ex_csv")
WRITE_MODE  = os.environ.get("WRITE_MODE", "overwrite")

# stage_sample: one local performance file -> quarterly files under OUT_DIR
SRC     = os.environ.get("SRC", "./data/Performance_2000.txt")
OUT_DIR = os.environ.get("OUT_DIR", "./data/perf")
