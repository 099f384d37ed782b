"""Output sinks."""

from .csv_sink import CSV_FIELDS, CSVSink, build_csv_content

__all__ = ["CSVSink", "CSV_FIELDS", "build_csv_content"]
