"""DuckDB-side identifier quoting handed to qualified names."""
