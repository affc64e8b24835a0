"""Unified command-line interface for shoplist.

Usage:
    shoplist parse "bread, milk, chicken"
    shoplist parse --file list.txt --ai
    shoplist classify "chicken with cheese" --explain
    shoplist fridge <image>
    shoplist validate-key
    shoplist serve [--port]
"""
