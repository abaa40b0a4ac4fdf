"""Command engine, ports and errors."""
