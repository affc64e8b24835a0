"""Core domain models for the shopping list project.

This module provides the data models used throughout the project:
- Category: Fixed grocery categories with their display order
- ShoppingItem, ShoppingList: Parsed list models
- FridgeAnalysis: Result of analyzing a fridge photo

Usage:
    from shoplist.domain import Category, ShoppingItem, ShoppingList
"""

from shoplist.domain.shopping import Category, FridgeAnalysis, ShoppingItem, ShoppingList, group_by_category

__all__ = [
    "Category",
    "FridgeAnalysis",
    "ShoppingItem",
    "ShoppingList",
    "group_by_category",
]
