from fastapi import Request
from fastapi.exceptions import RequestValidationError
from app.domain.response.custom_response import custom_error_response

async def ValidationHandler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        # drop the "body"/"query" prefix so fields read like the form's
        loc = [str(part) for part in err["loc"] if part not in ("body", "query", "path")]
        errors.append({
            "field": ".".join(loc),
            "message": f"{'.'.join(loc)}: {err['msg']}" if loc else err["msg"]
        })
    return custom_error_response(400, ", ".join(e["message"] for e in errors), errors)
