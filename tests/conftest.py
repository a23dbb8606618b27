"""
Shared fixtures: one local Spark session for the whole run and small
pipe-delimited performance files written to a temp directory.
"""
import os
import sys

# Workers must use the same interpreter as the driver
os.environ["PYSPARK_PYTHON"] = sys.executable
os.environ["PYSPARK_DRIVER_PYTHON"] = sys.executable

import pytest


# 16 columns: the 14 the walkthrough keeps plus two trailing ones it drops
Q1_ROWS = [
    "100001000001|01/01/2000|BANK A|8.0|75000.5|1|359|358|12/2029|10180|0|N|||X|Y",
    "100002000002|02/01/2000||7.5|120000.0|2|358|357|01/2030||1|N|01|03/2000|X|Y",
    "100003000003|03/01/2000|BANK B|7.25||3|357|356|02/2030|10420|0|N|||X|Y",
]
Q2_ROWS = [
    "100001000001|04/01/2000|BANK A|8.0|74800.0|4|356|355|12/2029|10180|0|N|||X|Y",
    "100004000004|05/01/2000|BANK C|6.875|90000.0|1|359|359|04/2030|12060|1|N|01|06/2000|X|Y",
]


def write_lines(path, lines):
    with open(path, "w") as f:
        f.write("\n".join(lines) + "\n")
    return str(path)


@pytest.fixture(scope="session")
def spark():
    from pyspark.sql import SparkSession

    spark = (SparkSession.builder
             .appName("dataframe_basics_tests")
             .master("local[1]")
             .config("spark.sql.shuffle.partitions", "1")
             .config("spark.ui.enabled", "false")
             .getOrCreate())
    spark.sparkContext.setLogLevel("ERROR")
    yield spark
    spark.stop()


@pytest.fixture
def perf_dir(tmp_path):
    base = tmp_path / "perf"
    base.mkdir()
    write_lines(base / "Performance_2000Q1.txt", Q1_ROWS)
    write_lines(base / "Performance_2000Q2.txt", Q2_ROWS)
    return str(base)
