"""Allow ``python -m term_snake``."""

from term_snake.app import main

main()
