"""
Core Game Systems
"""
