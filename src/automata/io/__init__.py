"""Input ingestion."""
