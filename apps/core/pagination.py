"""
Pagination Helpers

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.core.paginator import EmptyPage, Paginator


class Page:
    """
    One zero-indexed page over a Django Paginator plus the metadata clients need.

    A page index past the end yields empty content with last=True while the
    totals still describe the whole result set.
    """

    def __init__(self, paginator, number):
        """
        Args:
            paginator: django.core.paginator.Paginator over the ordered results
            number: Zero-based page index
        """
        self.paginator = paginator
        self.number = number

        try:
            self.content = list(paginator.page(number + 1).object_list)
        except EmptyPage:
            self.content = []

    @property
    def size(self):
        return self.paginator.per_page

    @property
    def total_elements(self):
        return self.paginator.count

    @property
    def total_pages(self):
        # Paginator reports one (empty) page for an empty result set
        return self.paginator.num_pages if self.paginator.count else 0

    @property
    def is_last(self):
        return self.number + 1 >= self.total_pages

    def metadata(self):
        return {
            'page': self.number,
            'size': self.size,
            'totalElements': self.total_elements,
            'totalPages': self.total_pages,
            'last': self.is_last,
        }

    def __repr__(self):
        return f"<Page {self.number} of {self.total_pages} ({self.total_elements} items)>"


def paginate_queryset(queryset, page, size):
    """
    Build the zero-based Page of an ordered queryset.

    Args:
        queryset: Ordered Django QuerySet (or list)
        page: Zero-based page index (>= 0)
        size: Page size (> 0)

    Returns:
        Page
    """
    if page < 0:
        raise ValueError("page must be >= 0")
    if size <= 0:
        raise ValueError("size must be > 0")

    return Page(Paginator(queryset, size), page)
