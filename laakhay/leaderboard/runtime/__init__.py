"""Runtime layer: REST transport and fan-out execution."""
