from .data_exporter import DataExporter

__all__ = [
    'DataExporter',
]
