"""HDFS helpers: configuration loading, client options, error mapping, summaries and a client."""

__version__ = "0.1.0"