"""Error Handlers - verifies the category to HTTP status table."""

import pytest

from billing.api.error_handlers import status_for_category
from billing.core.errors import ErrorCategory


@pytest.mark.parametrize(("category", "expected"), [
    (ErrorCategory.VALIDATION, 400),
    (ErrorCategory.AUTHENTICATION, 401),
    (ErrorCategory.RESOURCE_NOT_FOUND, 404),
    (ErrorCategory.CONFLICT, 409),
    (ErrorCategory.INTERNAL, 500),
    (ErrorCategory.DEPENDENCY, 503),
])
def test_status_for_category(category, expected):
    assert status_for_category(category) == expected
