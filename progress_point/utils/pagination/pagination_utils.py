"""Pagination Utilities - consistent pagination envelope (SoC)"""
from typing import Dict, List, Any, Optional
from math import ceil
from progress_point.config.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

def paginate_data(data: List[Any], page: int = 1, limit: int = 50) -> Dict:
    """
    Centralized pagination utility

    Args:
        data: List of items to paginate
        page: Page number (1-based)
        limit: Items per page

    Returns:
        Dict with paginated data and metadata
    """
    page = max(1, page)
    limit = max(1, min(limit, MAX_PAGE_LIMIT))

    total_count = len(data)
    total_pages = ceil(total_count / limit) if total_count > 0 else 1

    start_idx = (page - 1) * limit
    end_idx = start_idx + limit

    return {
        "data": data[start_idx:end_idx],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total_count,
            "totalPages": total_pages,
            "hasNext": page < total_pages,
            "hasPrev": page > 1
        }
    }

def get_pagination_params(page_param: Optional[str], limit_param: Optional[str]) -> tuple:
    """Extract and validate pagination parameters, falling back to defaults"""
    try:
        page = int(page_param) if page_param else 1
        page = max(1, page)
    except (ValueError, TypeError):
        page = 1

    try:
        limit = int(limit_param) if limit_param else DEFAULT_PAGE_LIMIT
        limit = max(1, min(limit, MAX_PAGE_LIMIT))
    except (ValueError, TypeError):
        limit = DEFAULT_PAGE_LIMIT

    return page, limit

def build_paginated_response(
    success: bool,
    data: List[Any],
    page: int,
    limit: int,
    additional_fields: Optional[Dict] = None
) -> Dict:
    """Build standardized paginated response"""
    paginated_result = paginate_data(data, page, limit)

    response = {
        "success": success,
        **paginated_result
    }

    if additional_fields:
        response.update(additional_fields)

    return response
