#!/usr/bin/env python3
"""
main.py — Entry point for term_snake.

Run from the repository root:
    python main.py

Controls: arrow keys steer, Q quits, R restarts after a game over.
Set TERM_SNAKE_LOG=/path/to/file to capture debug logs.
"""

from term_snake.app import main


if __name__ == "__main__":
    main()
