"""I/O layer: UCD readers, table snapshots and the default table loader."""
