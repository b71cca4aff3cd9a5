"""gitguide - a simulated Git and GitHub terminal for learning the workflow."""

__version__ = "0.1.0"
