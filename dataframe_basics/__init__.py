"""
Loading, reshaping and persisting quarterly loan performance data with
Spark DataFrames.
"""
