#!/usr/bin/env python3
"""
Minesweeper - terminal front-end.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N] [--color]
    python main.py play --rows R --cols C --mines K
    python main.py demo [--games N] [--delay S] [--seed N]
"""
from src.minefield.cli import main


if __name__ == "__main__":
    main()
