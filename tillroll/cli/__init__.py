"""Unified command-line interface for tillroll.

Usage:
    tillroll parse receipt.txt
    tillroll parse - --json < receipt.txt
    tillroll parse receipt.txt --locale fi-FI
    tillroll serve [--host] [--port]
"""
