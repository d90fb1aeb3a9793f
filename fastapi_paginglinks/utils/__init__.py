"""Query string helpers for pagination links."""

from .query_params import copy_url, get_int, query_params, replace_query_params

__all__ = ["copy_url", "get_int", "query_params", "replace_query_params"]
