import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from app.core.validation_handler import ValidationHandler
from app.domain.exceptions import StorageError, SubmissionError, ValidationError
from app.domain.response.custom_response import custom_error_response

logger = logging.getLogger(__name__)

async def submission_error_handler(request: Request, exc: SubmissionError):
    if isinstance(exc, ValidationError):
        return custom_error_response(exc.status_code, exc.message, exc.errors)
    if exc.status_code >= 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
        return custom_error_response(exc.status_code, StorageError.default_message)
    return custom_error_response(exc.status_code, exc.message)

async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"[API] {request.method} {request.url.path} DB error: {exc}", exc_info=exc)
    return custom_error_response(500, StorageError.default_message)

async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"[API] {request.method} {request.url.path} unexpected error: {exc}", exc_info=exc)
    return custom_error_response(500, "Something went wrong!")

def setup_exception_handlers(app: FastAPI):
    app.add_exception_handler(RequestValidationError, ValidationHandler)
    app.add_exception_handler(SubmissionError, submission_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
