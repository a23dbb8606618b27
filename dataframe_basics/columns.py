# dataframe_basics/columns.py

# Spark names headerless csv columns _c0, _c1, ... ; we keep the first 14
OLD_COLNAMES = [f"_c{i}" for i in range(14)]
NEW_COLNAMES = [
    "loan_id", "period", "servicer_name", "new_int_rt", "act_endg_upb", "loan_age", "mths_remng",
    "aj_mths_remng", "dt_matr", "cd_msa", "delq_sts", "flag_mod", "cd_zero_bal", "dt_zero_bal",
]


def select_columns(df, cols):
    return df.select(*cols)


def rename_columns(df, old_colnames, new_colnames):
    if len(old_colnames) != len(new_colnames):
        raise ValueError(
            f"Cannot rename {len(old_colnames)} columns to {len(new_colnames)} names"
        )
    # withColumnRenamed returns a new DataFrame; unknown names are left alone
    for old, new in zip(old_colnames, new_colnames):
        df = df.withColumnRenamed(old, new)
    return df


def limit_and_rename(df):
    perf_lim = select_columns(df, OLD_COLNAMES)
    return rename_columns(perf_lim, OLD_COLNAMES, NEW_COLNAMES)
