"""Feature packages: tag extraction, book aggregation, and export."""
