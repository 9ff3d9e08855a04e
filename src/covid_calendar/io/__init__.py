"""I/O layer: dataset download and CSV reading."""
