from .csv import load_csv, write_csv

__all__ = ["load_csv", "write_csv"]
