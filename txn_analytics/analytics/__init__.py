"""Aggregation queries and summary reports over a DataStore."""
