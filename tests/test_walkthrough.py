import os

from dataframe_basics import config, walkthrough
from dataframe_basics.columns import limit_and_rename
from dataframe_basics.diagnostics import dims
from dataframe_basics.export import MATCH_MSG, MISMATCH_MSG
from dataframe_basics.session import create_spark_session
from dataframe_basics.walkthrough import run

def test_run_end_to_end(spark, perf_dir, tmp_path, capsys):
    ok = run(
        spark,
        base=perf_dir,
        year=2000,
        first=2,
        last=2,
        out_parquet=str(tmp_path / "hfpc_ex"),
        out_csv=str(tmp_path / "hfpc_ex_csv"),
    )
    out = capsys.readouterr().out

    assert ok is True
    assert out.count(MATCH_MSG) == 2
    assert MISMATCH_MSG not in out
    assert "rows: 5, columns: 16" in out
    assert (tmp_path / "hfpc_ex").is_dir()
    assert (tmp_path / "hfpc_ex_csv").is_dir()


def test_run_without_appending(spark, perf_dir, tmp_path, capsys):
    run(spark, base=perf_dir, year=2000, first=3, last=2,
        out_parquet=str(tmp_path / "p"), out_csv=str(tmp_path / "c"))
    assert "rows: 3, columns: 16" in capsys.readouterr().out


def test_create_spark_session_reuses_active(spark):
    assert create_spark_session("other", master="local[1]", log_level="ERROR") is spark


def test_create_spark_session_defaults_spark_home(spark, tmp_path, monkeypatch):
    monkeypatch.setenv("SPARK_HOME", "")
    monkeypatch.setattr(config, "SPARK_HOME_DEFAULT", str(tmp_path))

    create_spark_session("other", log_level="ERROR")
    assert os.environ["SPARK_HOME"] == str(tmp_path)


def test_run_with_empty_frame(spark, perf_dir, tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(walkthrough, "limit_and_rename", lambda df: limit_and_rename(df).limit(0))
    ok = run(spark, base=perf_dir, year=2000, first=2, last=2,
             out_parquet=str(tmp_path / "p"), out_csv=str(tmp_path / "c"))
    out = capsys.readouterr().out

    assert ok is True
    assert out.count(MATCH_MSG) == 2


def test_run_counts_source_once_for_export_checks(spark, perf_dir, tmp_path, monkeypatch):
    calls = []

    def counting_dims(df):
        calls.append(df)
        return dims(df)

    monkeypatch.setattr(walkthrough, "dims", counting_dims)
    run(spark, base=perf_dir, year=2000, first=2, last=2,
        out_parquet=str(tmp_path / "p"), out_csv=str(tmp_path / "c"))
    # the exported frame once, then each read-back
    assert len(calls) == 3
