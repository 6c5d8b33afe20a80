from .closure import compute_closure, closure_table
from .errors import CityLinkError, InvalidNode, MalformedInput
from .graph_store import Matrix, load, load_file, release
from .search import find_path
