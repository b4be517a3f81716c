"""taskmate: a line-command personal task tracker."""

__version__ = "0.1.0"
