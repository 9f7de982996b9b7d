"""Uploaded content handling."""

from .data_uri import DataUri, file_to_data_uri, parse_data_uri, to_data_uri

__all__ = ["DataUri", "parse_data_uri", "to_data_uri", "file_to_data_uri"]
