"""
Standardized API Response Utilities

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from rest_framework.response import Response
from rest_framework import status
from django.utils import timezone


def success_response(data=None, message=None, status_code=status.HTTP_200_OK, meta=None):
    """
    Create a standardized success response.

    Args:
        data: Response data
        message: Success message
        status_code: HTTP status code
        meta: Additional metadata

    Returns:
        Response: DRF Response object
    """
    response_data = {
        'success': True,
        'data': data,
        'meta': {
            'timestamp': timezone.now().isoformat(),
            **(meta or {})
        }
    }

    if message:
        response_data['message'] = message

    return Response(response_data, status=status_code)


def error_response(message, code=None, details=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Error code
        details: Additional error details
        status_code: HTTP status code

    Returns:
        Response: DRF Response object
    """
    response_data = {
        'success': False,
        'error': {
            'code': code or 'ERROR',
            'message': message,
            'details': details or {}
        },
        'meta': {
            'timestamp': timezone.now().isoformat()
        }
    }

    return Response(response_data, status=status_code)


def page_response(page, serializer_class, message=None):
    """
    Create a response for one page of results.

    Args:
        page: apps.core.pagination.Page instance
        serializer_class: Serializer class for the page items
        message: Optional message

    Returns:
        Response: DRF Response object carrying content plus page metadata
    """
    serializer = serializer_class(page.content, many=True)
    return success_response(
        data={
            'content': serializer.data,
            **page.metadata()
        },
        message=message
    )


def no_content_response():
    """Empty 204 response used after deletions."""
    return Response(status=status.HTTP_204_NO_CONTENT)
