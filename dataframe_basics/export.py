# dataframe_basics/export.py
WRITE_FORMATS = ("parquet", "csv")
SAVE_MODES = ("overwrite", "append", "error", "errorifexists", "ignore")

MATCH_MSG    = "Dimension values are equal"
MISMATCH_MSG = "Error: dimension values not equal; DataFrame did not export correctly"


def write_frame(df, path, fmt="parquet", mode="overwrite"):
    """
    Write `df` to `path` as a folder of partitioned files, one per partition.

    Treat the folder as a single file: do not save anything else into it.
    """
    if fmt not in WRITE_FORMATS:
        raise ValueError(f"Unsupported format {fmt!r}, expected one of {WRITE_FORMATS}")
    if mode not in SAVE_MODES:
        raise ValueError(f"Unsupported save mode {mode!r}, expected one of {SAVE_MODES}")

    df.write.format(fmt).mode(mode).save(path)
    print(f"✅ Wrote {fmt} to {path}")
    return path


def read_back(spark, path, fmt="parquet", schema=None):
    """
    Read an exported folder back. Parquet carries its own schema. The csv
    export has no header, so columns come back as _c0, _c1, ... and types are
    inferred, unless `schema` is given; an empty export has nothing to infer
    from and needs one.
    """
    if fmt == "parquet":
        return spark.read.parquet(path)
    if fmt == "csv":
        reader = spark.read.option("header", "false")
        if schema is not None:
            reader = reader.schema(schema)
        else:
            reader = reader.option("inferSchema", "true")
        return reader.csv(path)
    raise ValueError(f"Unsupported format {fmt!r}, expected one of {WRITE_FORMATS}")


def dimensions_match(dim1, dim2):
    if dim1[0] != dim2[0] or dim1[1] != dim2[1]:
        print(MISMATCH_MSG)
        return False
    print(MATCH_MSG)
    return True
