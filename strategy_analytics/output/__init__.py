"""Console and DataFrame output."""
