"""Rock, paper, scissor against the computer in the terminal."""

__version__ = "1.0.0"
__all__ = ["choices", "engine", "state"]