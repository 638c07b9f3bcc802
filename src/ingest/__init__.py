"""Input readers: the NDJSON event log and the hardware-inventory snapshot."""
