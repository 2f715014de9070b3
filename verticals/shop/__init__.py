"""Shop vertical — discount rules over customer purchases.

Demonstrates the patterns working together in one domain:
- Threshold rules engine with independent, priority-ordered rules
- In-memory customer repository
- Dataclass configuration with env overrides
- Listener-based notification dispatch
- Template engine renderer
"""
