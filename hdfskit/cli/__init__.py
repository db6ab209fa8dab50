"""Helpers for an HDFS command-line tool: paths, sizes, completion, sections and arguments."""