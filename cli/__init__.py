"""hostprobe command line interface."""
