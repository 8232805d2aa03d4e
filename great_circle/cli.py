"""
CLI entry point for the great-circle command.

This provides the console_scripts entry point for the route runner.
"""
from great_circle.runner import main

# Re-export main for the console_scripts entry point
__all__ = ['main']

if __name__ == '__main__':
    main()
