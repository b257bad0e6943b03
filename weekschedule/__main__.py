"""
Convenience entry point for running weekschedule directly.

Usage: python -m weekschedule [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app(prog_name="weekschedule")
