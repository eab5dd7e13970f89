"""
Infrastructure services: timers, rendering, video export and the hosted web game.
"""
