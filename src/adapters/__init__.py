"""Interface and command-line adapters."""
