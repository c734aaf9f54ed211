"""
Main entry point for the career_assistant package.

Usage:
    python -m career_assistant [command] [options]

See 'python -m career_assistant --help' for available commands.
"""

from career_assistant.cli import main

if __name__ == "__main__":
    main()
