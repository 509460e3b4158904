"""Interactive Australian rules football score calculator: teams, console input and the menu-driven tracker."""

__version__ = "1.0.0"
__all__ = ["console", "team", "tracker"]