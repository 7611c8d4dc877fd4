"""
Deterministic calculation engine.

Pure Python math. Three independent pricing models:
  - area-tier: room dimensions → area, gallons, labor hours, cost by paint quality
  - charge-rate: per-unit contractor charge rates + overhead, markup, tax
  - simplified-context: $/sqft from a finished chat conversation
"""
