# =============================================
# File: upcycle/utils/tips.py
# Purpose: Static recycling tips keyed by lowercase item name
# =============================================
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from upcycle.schemas import RecyclingTip


def _tip(key: str, suggestions: List[str], how_to: str) -> RecyclingTip:
    return RecyclingTip(key=key, suggestions=suggestions, how_to=how_to)


# Insertion order is the matcher's tie-break order
RECYCLING_TIPS: Mapping[str, RecyclingTip] = MappingProxyType({
    t.key: t
    for t in (
        _tip(
            "water bottle",
            [
                "Cut the bottom off to create a small planter for herbs or succulents",
                "Use as a bird feeder by cutting holes and adding perches",
                "Fill with water and freeze to make an ice pack",
                "Create a self-watering system for plants by poking holes in the cap",
            ],
            "Clean thoroughly before reusing. For planters, cut the bottle horizontally and use the bottom part.",
        ),
        _tip(
            "paper",
            [
                "Make homemade recycled paper for crafts",
                "Create paper mache art projects",
                "Shred for packaging material or pet bedding",
                "Compost it to enrich your garden soil",
            ],
            "For paper mache, tear into strips and mix with a solution of water and glue. "
            "For composting, tear into small pieces to speed decomposition.",
        ),
        _tip(
            "cardboard",
            [
                "Create storage boxes or organizers",
                "Make children's toys like playhouses or cars",
                "Use as garden mulch or weed barrier",
                "Create DIY wall art or photo frames",
            ],
            "For garden use, remove any tape or labels and lay flat under a layer of soil or mulch.",
        ),
        _tip(
            "glass jar",
            [
                "Storage containers for pantry items",
                "Make candle holders or vases",
                "Create terrariums for small plants",
                "Use as drinking glasses or for homemade preserves",
            ],
            "Remove labels by soaking in warm soapy water. For candle holders, decorate with paint, twine, or decoupage.",
        ),
        _tip(
            "t-shirt",
            [
                "Cut into cleaning rags",
                "Make a reusable shopping bag (no-sew option available)",
                "Create a pillow cover",
                "Make a pet toy by braiding strips",
            ],
            "For a no-sew bag, cut off the sleeves and collar, then cut fringe at the bottom and tie the strips together.",
        ),
        _tip(
            "plastic bag",
            [
                "Reuse for trash or pet waste",
                "Crochet into a durable tote bag",
                "Use as padding when shipping packages",
                "Make plastic yarn (plarn) for crafts",
            ],
            "To make plarn, flatten bags, cut into strips, and loop together to form a continuous strand for crocheting or knitting.",
        ),
    )
})

# Shown whenever nothing better is available
GENERIC_TIPS: List[str] = [
    "Check if your local recycling center accepts this material",
    "Consider donating if the item is still in good condition",
    "Search online for DIY upcycling projects specific to your item",
    "For electronics, look for e-waste recycling programs in your area",
]
GENERIC_HOW_TO = (
    "Always check with your local recycling guidelines to ensure proper disposal "
    "of items that cannot be repurposed."
)


def item_tips(material_type: str) -> List[str]:
    return [
        f"Consider reusing this {material_type} item for crafts or storage",
        "Check if your local recycling center accepts this material",
        "Search online for specific upcycling ideas for this item",
    ]


def material_tips(material_type: str) -> List[str]:
    return [
        f"Check if your local recycling center accepts {material_type}",
        "Consider donating if the item is still in good condition",
        f"Search online for DIY upcycling projects for {material_type} items",
        "Look for specialized recycling programs in your area",
    ]


def material_how_to(material_type: str) -> str:
    return (
        f"{material_type} materials can often be recycled, but may require special handling. "
        "Always follow your local recycling guidelines for proper disposal."
    )
