from .pages import (
    PAGE_SIZE, PageResonanceStats,
    locate, page_numbers, is_page_boundary, next_page_boundary,
    navigate_pages, moment_stats,
)
from .lagrange import (
    PRIMARY_LAGRANGE_POINTS, SECONDARY_WELLS, DEFAULT_SEARCH_RADIUS,
    DEFAULT_MAX_STEPS, classify, describe_lagrange_point,
    nearest_reference_point, lagrange_gravity,
)
from .space import PageTopology, PageInfo, TopologyAnalysis

__all__ = [
    "PAGE_SIZE", "PageResonanceStats",
    "locate", "page_numbers", "is_page_boundary", "next_page_boundary",
    "navigate_pages", "moment_stats",
    "PRIMARY_LAGRANGE_POINTS", "SECONDARY_WELLS", "DEFAULT_SEARCH_RADIUS",
    "DEFAULT_MAX_STEPS", "classify", "describe_lagrange_point",
    "nearest_reference_point", "lagrange_gravity",
    "PageTopology", "PageInfo", "TopologyAnalysis",
]
