from .builder import (
    FailureBuilder,
    FailureList,
    render_list,
)

__all__ = [
    "FailureBuilder",
    "FailureList",
    "render_list",
]
