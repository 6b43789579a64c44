from .query import format_option_value, to_query_string

__all__ = ["format_option_value", "to_query_string"]
