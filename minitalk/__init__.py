"""Send text between processes as a stream of SIGUSR1 and SIGUSR2 signals."""

__version__ = "0.1.0"