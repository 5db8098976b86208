"""Pydantic schemas for list and todo endpoints."""

from .lists import ListCreate, ListResponse, ListUpdate
from .todos import TodoCreate, TodoResponse, TodoUpdate

__all__ = [
    "ListCreate",
    "ListUpdate",
    "ListResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
]
