"""
Custom Exception Handlers

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from rest_framework.views import exception_handler, set_rollback
from rest_framework.response import Response
from rest_framework import status
from django.db import IntegrityError
from django.db.models import ProtectedError
from django.utils import timezone
import logging

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses.

    Domain exceptions keep their own code and status, storage constraint
    violations become a generic conflict and anything unexpected becomes
    an opaque internal error.
    """
    request = context.get('request') if context else None

    if isinstance(exc, FieldRinoException):
        set_rollback()
        if exc.status_code >= 500:
            logger.error(f"API Exception: {exc}", exc_info=True)
        else:
            logger.warning(f"API Exception: {exc.code}: {exc.message}")
        return build_error_response(
            code=exc.code,
            message=exc.message,
            details=exc.details,
            status_code=exc.status_code,
            request=request
        )

    if isinstance(exc, (IntegrityError, ProtectedError)):
        set_rollback()
        logger.warning(f"Data integrity violation: {exc}")
        return build_error_response(
            code=get_error_code(status.HTTP_409_CONFLICT),
            message='Data integrity violation. The record may already exist or is referenced by another record.',
            status_code=status.HTTP_409_CONFLICT,
            request=request
        )

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None:
        set_rollback()
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return build_error_response(
            code=get_error_code(status.HTTP_500_INTERNAL_SERVER_ERROR),
            message='An unexpected error occurred. Please try again later.',
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            request=request
        )

    logger.warning(f"API Exception: {exc}")

    response.data = {
        'success': False,
        'error': {
            'code': get_error_code(response.status_code),
            'message': get_error_message(exc, response),
            'details': response.data if isinstance(response.data, dict) else {'detail': response.data}
        },
        'meta': {
            'timestamp': timezone.now().isoformat(),
            'path': request.path if request else None
        }
    }

    return response


def build_error_response(code, message, status_code, details=None, request=None):
    """Build an error Response in the standard envelope."""
    return Response({
        'success': False,
        'error': {
            'code': code,
            'message': message,
            'details': details or {}
        },
        'meta': {
            'timestamp': timezone.now().isoformat(),
            'path': request.path if request else None
        }
    }, status=status_code)


def get_error_code(status_code):
    """Get error code based on HTTP status code."""
    error_codes = {
        400: 'VALIDATION_ERROR',
        404: 'NOT_FOUND',
        405: 'METHOD_NOT_ALLOWED',
        409: 'CONFLICT',
        415: 'UNSUPPORTED_MEDIA_TYPE',
        422: 'BUSINESS_RULE_VIOLATION',
        500: 'INTERNAL_SERVER_ERROR',
    }
    return error_codes.get(status_code, 'UNKNOWN_ERROR')


def get_error_message(exc, response):
    """Get user-friendly error message."""
    if hasattr(exc, 'detail'):
        if isinstance(exc.detail, dict):
            # Return first error message from validation errors
            for field, errors in exc.detail.items():
                if isinstance(errors, list) and errors:
                    return f"{field}: {errors[0]}"
                return str(errors)
        if isinstance(exc.detail, list) and exc.detail:
            return str(exc.detail[0])
        return str(exc.detail)

    return str(exc)


class FieldRinoException(Exception):
    """Base exception for FieldRino application."""
    default_message = "An error occurred"
    default_code = "FIELDRINO_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message=None, code=None, details=None):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(FieldRinoException):
    """Raised when a referenced entity does not exist."""
    default_message = "Resource not found"
    default_code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource, resource_id):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=f"{resource} not found with id: {resource_id}",
            details={'resource': resource, 'id': resource_id}
        )


class BusinessRuleViolation(FieldRinoException):
    """Raised when a write would break a domain rule."""
    default_message = "Business rule violation"
    default_code = "BUSINESS_RULE_VIOLATION"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
