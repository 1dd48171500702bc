from .repair_json_parser import RepairJSONParser

__all__ = ["RepairJSONParser"]
