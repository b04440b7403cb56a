from .errors import LoaderError
from .tree_loader import export_yaml, read_tree_file, write_tree_file

__all__ = ["read_tree_file", "write_tree_file", "export_yaml", "LoaderError"]
