"""JSON rendering of aggregation results."""

from .json_exporter import book_to_dict, conflict_to_dict, export_json, result_to_dict, track_to_dict

__all__ = ["book_to_dict", "conflict_to_dict", "export_json", "result_to_dict", "track_to_dict"]
