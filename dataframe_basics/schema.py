# dataframe_basics/schema.py
from pyspark.sql.functions import col
from pyspark.sql.types import (
    StructType, StructField, StringType, IntegerType, LongType, DoubleType
)

# Same dtypes Spark infers for the first 14 performance columns.
# Declaring them up front skips the extra inference pass over the data,
# but values that do not parse as the declared type come back as null.
PERF_SCHEMA = StructType([
    StructField("loan_id", LongType(), True),
    StructField("period", StringType(), True),
    StructField("servicer_name", StringType(), True),
    StructField("new_int_rt", DoubleType(), True),
    StructField("act_endg_upb", DoubleType(), True),
    StructField("loan_age", IntegerType(), True),
    StructField("mths_remng", IntegerType(), True),
    StructField("aj_mths_remng", IntegerType(), True),
    StructField("dt_matr", StringType(), True),
    StructField("cd_msa", IntegerType(), True),
    StructField("delq_sts", StringType(), True),
    StructField("flag_mod", StringType(), True),
    StructField("cd_zero_bal", IntegerType(), True),
    StructField("dt_zero_bal", StringType(), True),
])


def generic_schema(schema=PERF_SCHEMA):
    """Same types as `schema`, with the _c0.. names of a headerless read."""
    return StructType([
        StructField(f"_c{i}", field.dataType, field.nullable)
        for i, field in enumerate(schema.fields)
    ])


def dtypes(df):
    return df.dtypes


def cast_column(df, name, dtype):
    if name not in df.columns:
        raise ValueError(f"Column not found: {name} (have {df.columns})")
    # withColumn on an existing name replaces it in place, keeping column order
    return df.withColumn(name, col(name).cast(dtype))
