"""Building blocks of a small command shell: syntax checks, splitting, expansion and execution."""

__version__ = "0.1.0"