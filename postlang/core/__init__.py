"""Core — Pipeline context, contracts, engine and logging."""
