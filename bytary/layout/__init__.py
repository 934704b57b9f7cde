from bytary.layout.spacing import iter_layout, layout, separator_after

__all__ = [
    "iter_layout",
    "layout",
    "separator_after",
]
