"""Generate test cases for GitHub repositories and open pull requests with them."""

__version__ = "1.0.0"
