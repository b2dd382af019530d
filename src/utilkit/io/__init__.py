from .io_file import read_matrix, write_matrix

__all__ = ["read_matrix", "write_matrix"]
