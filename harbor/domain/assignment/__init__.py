"""
Capacity-bounded assignment of ships to docks and haulers.
"""
