"""Tree walking and text tokenization for document mutilation."""

from .tokenizer import iter_runs, mutilate_text
from .walker import mutilate, mutilate_document, mutilate_tree, write_node

__all__ = [
    "iter_runs",
    "mutilate",
    "mutilate_document",
    "mutilate_text",
    "mutilate_tree",
    "write_node",
]
