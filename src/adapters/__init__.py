"""Host-side adapters: terminal I/O and display formatting."""
