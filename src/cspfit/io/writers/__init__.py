"""Output writers for CSPFit results."""

from cspfit.io.writers.base import OutputWriter, WriterConfig, format_float
from cspfit.io.writers.csv_writer import CSVWriter
from cspfit.io.writers.json_writer import JSONWriter, NumpyEncoder

WRITERS: dict[str, type[CSVWriter] | type[JSONWriter]] = {
    "csv": CSVWriter,
    "json": JSONWriter,
}

__all__ = [
    "WRITERS",
    "CSVWriter",
    "JSONWriter",
    "NumpyEncoder",
    "OutputWriter",
    "WriterConfig",
    "format_float",
]
