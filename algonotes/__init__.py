"""Classic algorithms and data structures: graphs, flows, strings, dynamic programming, sorting, searching and trees."""

__version__ = "0.1.0"

__all__ = [
    "binary_tree",
    "dates",
    "dynamic",
    "flows",
    "gf16",
    "graph_order",
    "huffman",
    "linked_list",
    "queens",
    "searching",
    "shortest_paths",
    "sorting",
    "spanning",
    "splay",
    "strassen",
    "strings",
    "threaded_tree",
]