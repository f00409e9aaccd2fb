"""
Inventory App - Products, batches and shelving movements

Stock on hand is never stored: storage and shelf quantities are derived
from the append-only log of shelving actions recorded per product batch.

Architecture:
- Models: Product, ProductBatch, ShelvingAction
- Services: stock_calculation (pure arithmetic), inventory_management
- Views: read-only product/batch endpoints, staff-only movement recording
"""
