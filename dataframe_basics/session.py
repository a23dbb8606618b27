# dataframe_basics/session.py
import os
from pyspark.sql import SparkSession

from dataframe_basics import config


def create_spark_session(app_name, master=None, log_level=None):
    # Use a cluster install when one is present, otherwise the pip-installed pyspark
    if not os.environ.get("SPARK_HOME") and os.path.isdir(config.SPARK_HOME_DEFAULT):
        os.environ["SPARK_HOME"] = config.SPARK_HOME_DEFAULT

    builder = SparkSession.builder.appName(app_name)
    master = master or config.SPARK_MASTER
    if master:
        builder = builder.master(master)

    spark = builder.getOrCreate()
    spark.sparkContext.setLogLevel(log_level or config.SPARK_LOG_LEVEL)
    return spark
