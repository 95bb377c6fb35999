"""Browse, sort, report, hide and delete machine-learning experiment results in the terminal."""

__version__ = "1.1.0"