from .concat import append, append_many, concat, concat_many, prepend, prepend_many
from .flatten import flat_map, flatten
from .fold import count, each, force, reduce, to_list
from .sort import sort, sort_by, sort_with
from .zip import zip, zip_many

__all__ = (
    # Concat
    "append",
    "append_many",
    "concat",
    "concat_many",
    "prepend",
    "prepend_many",
    # Flatten
    "flat_map",
    "flatten",
    # Fold
    "count",
    "each",
    "force",
    "reduce",
    "to_list",
    # Sort
    "sort",
    "sort_by",
    "sort_with",
    # Zip
    "zip",
    "zip_many",
)
