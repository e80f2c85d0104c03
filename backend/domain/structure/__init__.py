"""
Structure Domain - hierarchical elements.

Elements that form trees through a parent reference:
- Categories
- Storage locations
- Footprints
- Manufacturers
- Suppliers
"""
