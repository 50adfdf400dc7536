"""Core type definitions for propcopy."""

from typing import Any

type TypeTag = Any
"""Type alias for a declared type handle.

A TypeTag is a plain class (``int``, ``Order``) or a typing form
(``list[Line]``, ``Line | None``, ``Any``). It is only used to classify
values, test assignability, and construct blank sequence elements.
"""
