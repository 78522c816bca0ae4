"""Bundled coating catalog used when no catalog file is configured."""

from __future__ import annotations

from typing import Any

DEFAULT_CATALOG: list[dict[str, Any]] = [
    {
        "sku": "AP-EXT-IC-20L-001",
        "product_name": "Industrial Exterior Protective Paint",
        "category": "Exterior / Industrial",
        "properties": {"corrosion_resistance": "High", "uv_resistance": "High", "durability": "High", "coverage": 8},
        "compliance": ["ISO 12944", "ASTM D523"],
        "cost_per_unit": 420,
        "pack_sizes": [20, 200],
        "applications": ["Industrial buildings", "Infrastructure projects", "Coastal facilities"],
    },
    {
        "sku": "AP-EPX-PRT-10L-014",
        "product_name": "Epoxy Protective Coating",
        "category": "Protective / Industrial",
        "properties": {"corrosion_resistance": "Very High", "uv_resistance": "Low", "durability": "Very High", "coverage": 6},
        "compliance": ["ISO 1461", "ASTM D4541"],
        "cost_per_unit": 680,
        "pack_sizes": [10, 50],
        "applications": ["Chemical storage tanks", "Pipelines", "Industrial floors"],
    },
    {
        "sku": "AP-IND-ECO-20L-009",
        "product_name": "Economy Industrial Coating",
        "category": "Industrial / Economy",
        "properties": {"corrosion_resistance": "Medium", "uv_resistance": "Medium", "durability": "Medium", "coverage": 7},
        "compliance": ["Basic ISO"],
        "cost_per_unit": 310,
        "pack_sizes": [20, 200],
        "applications": ["Warehouse interiors", "Non-critical infrastructure"],
    },
    {
        "sku": "AP-EXT-PRM-20L-002",
        "product_name": "Premium Exterior Finish",
        "category": "Exterior",
        "properties": {"corrosion_resistance": "High", "uv_resistance": "Very High", "durability": "High", "coverage": 9},
        "compliance": ["ISO 12944", "Environmental Safe Coatings"],
        "cost_per_unit": 520,
        "pack_sizes": [20],
        "applications": ["Architectural facades", "Commercial exteriors"],
    },
    {
        "sku": "AP-INT-PLUS-5L-011",
        "product_name": "Interior Durable Emulsion",
        "category": "Interior",
        "properties": {"corrosion_resistance": "Low", "uv_resistance": "Low", "durability": "High", "coverage": 10},
        "compliance": ["Low VOC"],
        "cost_per_unit": 210,
        "pack_sizes": [5, 20],
        "applications": ["Office interiors", "Residential interiors"],
    },
    {
        "sku": "AP-ANTI-CORR-DR-200L-020",
        "product_name": "Anti-Corrosive Primer (Drum)",
        "category": "Protective / Industrial",
        "properties": {"corrosion_resistance": "Very High", "uv_resistance": "Low", "durability": "High", "coverage": 5},
        "compliance": ["ASTM D714", "ISO 12944"],
        "cost_per_unit": 480,
        "pack_sizes": [200],
        "applications": ["Structural steel", "Bridges", "Offshore platforms"],
    },
    {
        "sku": "AP-UV-SHIELD-4L-033",
        "product_name": "UV Stabilized Topcoat",
        "category": "Exterior",
        "properties": {"corrosion_resistance": "Medium", "uv_resistance": "Very High", "durability": "High", "coverage": 8},
        "compliance": ["ASTM D523"],
        "cost_per_unit": 610,
        "pack_sizes": [4, 20],
        "applications": ["Facade coatings", "Solar-exposed structures"],
    },
    {
        "sku": "AP-CHEM-RES-10L-044",
        "product_name": "Chemical Resistant Coating",
        "category": "Protective",
        "properties": {"corrosion_resistance": "High", "uv_resistance": "Low", "durability": "Very High", "coverage": 6},
        "compliance": ["ISO 1461", "Chemical Safety Std"],
        "cost_per_unit": 700,
        "pack_sizes": [10, 50],
        "applications": ["Chemical plants", "Storage tanks"],
    },
    {
        "sku": "AP-FIRE-RET-20L-055",
        "product_name": "Fire Retardant Coating",
        "category": "Protective",
        "properties": {"corrosion_resistance": "Medium", "uv_resistance": "Medium", "durability": "High", "coverage": 6},
        "compliance": ["Fire Safety Std", "ISO 9001"],
        "cost_per_unit": 750,
        "pack_sizes": [20],
        "applications": ["Structural steel", "Large enclosures"],
    },
    {
        "sku": "AP-ECON-EXT-20L-066",
        "product_name": "Economy Exterior Coating",
        "category": "Exterior / Economy",
        "properties": {"corrosion_resistance": "Medium", "uv_resistance": "Medium", "durability": "Medium", "coverage": 7},
        "compliance": ["Basic ISO"],
        "cost_per_unit": 330,
        "pack_sizes": [20],
        "applications": ["Low-cost housing", "Non-critical exteriors"],
    },
    {
        "sku": "AP-MARINE-COAT-20L-077",
        "product_name": "Marine Grade Coating",
        "category": "Protective / Exterior",
        "properties": {"corrosion_resistance": "Very High", "uv_resistance": "High", "durability": "Very High", "coverage": 6},
        "compliance": ["ISO 12944", "Marine Coating Std"],
        "cost_per_unit": 820,
        "pack_sizes": [20, 200],
        "applications": ["Ships", "Offshore structures", "Coastal installations"],
    },
    {
        "sku": "AP-INT-ECO-1L-088",
        "product_name": "Budget Interior Emulsion",
        "category": "Interior / Economy",
        "properties": {"corrosion_resistance": "Low", "uv_resistance": "Low", "durability": "Medium", "coverage": 11},
        "compliance": ["Low VOC"],
        "cost_per_unit": 150,
        "pack_sizes": [1, 5],
        "applications": ["Residential interiors"],
    },
]
