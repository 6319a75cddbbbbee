from ._dispatcher import RequestDispatcher, dispatch, merge_headers

__all__ = ["RequestDispatcher", "dispatch", "merge_headers"]
