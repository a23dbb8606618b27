# dataframe_basics/diagnostics.py
"""
Printing helpers for looking at a DataFrame: dimensions, names, rows,
a compact per-column view and the schema.
"""
from dataframe_basics.schema import dtypes


def dims(df):
    # count() runs a job over every partition
    return df.count(), len(df.columns)


def show_dims(label, df):
    n, m = dims(df)
    print(f"[{label}] rows: {n}, columns: {m}")
    return n, m


def show_columns(df):
    print(f"Columns: {df.columns}")
    return df.columns


def show_head(df, num=5):
    rows = df.head(num)
    for row in rows:
        print(row)
    return rows


def show_structure(df, num=6):
    """Compact view of the first rows, one line per column."""
    rows = df.head(num)
    print(f"'DataFrame': {len(df.columns)} variables:")
    lines = []
    for name, dtype in dtypes(df):
        values = ", ".join("NA" if row[name] is None else str(row[name]) for row in rows)
        lines.append(f" $ {name:<15}: {dtype:<8} {values}")
    print("\n".join(lines))
    return lines


def show_schema(df):
    print(f"dtypes: {dtypes(df)}")
    print(f"schema: {df.schema.simpleString()}")
    df.printSchema()
    return df.schema
