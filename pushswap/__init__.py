"""Sort integers on two stacks with a limited instruction set and print the instructions."""

__version__ = "0.1.0"