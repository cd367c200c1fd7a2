import math
from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse

def custom_error_response(status_code: int = 400, message: str = "", errors: Optional[List[Dict[str, str]]] = None):
    """
    Return the standard error JSONResponse; only the message and status_code are required.
    """
    content: Dict[str, Any] = {
        "success": False,
        "status_code": status_code,
        "message": message
    }
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)

def build_pagination(total: int, page: int, limit: int) -> Dict[str, int]:
    pages = math.ceil(total / limit) if limit else 0
    return {
        "total": total,
        "page": page,
        "limit": limit,
        "pages": pages,
        "totalPages": pages
    }
