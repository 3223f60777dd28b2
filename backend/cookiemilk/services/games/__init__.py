"""Game domain services: the board engine, its random source and the arena.

This package contains pure domain logic that should be imported by HTTP
routes and CLI commands, keeping transport concerns separated from core
game mechanics.
"""
