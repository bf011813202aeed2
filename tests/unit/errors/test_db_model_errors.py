# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the db_model error hierarchy."""

from uuid import uuid4

import pytest

from db_model.enums import EnumDbModelErrorCode
from db_model.errors import (
    ConnectionUnresolvedError,
    DatabaseConnectionError,
    DbModelError,
    InvalidProcedureNameError,
    ModelDbErrorContext,
    ModelNotFoundError,
    RowNotFoundError,
)


class TestDbModelError:
    def test_defaults(self):
        error = DbModelError("Operation failed")

        assert error.message == "Operation failed"
        assert error.error_code is EnumDbModelErrorCode.OPERATION_FAILED
        assert error.context == ModelDbErrorContext()
        assert error.extra_context == {}
        assert error.correlation_id is None
        assert str(error) == "[OPERATION_FAILED] Operation failed"

    def test_context_and_extras(self):
        correlation_id = uuid4()
        context = ModelDbErrorContext(
            operation="find_by_id", table="jobs", correlation_id=correlation_id
        )

        error = DbModelError("jobs not found", context=context, pk=42)

        assert error.context.table == "jobs"
        assert error.correlation_id == correlation_id
        assert error.extra_context == {"pk": 42}

    def test_chaining(self):
        cause = OSError("connection refused")

        with pytest.raises(DatabaseConnectionError) as exc_info:
            try:
                raise cause
            except OSError as e:
                raise DatabaseConnectionError("Failed to connect") from e

        assert exc_info.value.__cause__ is cause


@pytest.mark.parametrize(
    ("error_class", "code"),
    [
        (ConnectionUnresolvedError, EnumDbModelErrorCode.CONNECTION_UNRESOLVED),
        (DatabaseConnectionError, EnumDbModelErrorCode.CONNECTION_FAILED),
        (ModelNotFoundError, EnumDbModelErrorCode.MODEL_NOT_FOUND),
        (RowNotFoundError, EnumDbModelErrorCode.ROW_NOT_FOUND),
        (InvalidProcedureNameError, EnumDbModelErrorCode.INVALID_PROCEDURE_NAME),
    ],
)
def test_subclass_error_codes(error_class, code):
    error = error_class("boom")

    assert isinstance(error, DbModelError)
    assert error.error_code is code
    assert str(error) == f"[{code.value}] boom"


def test_connection_unresolved_default_message():
    error = ConnectionUnresolvedError()

    assert error.message == "Cannot resolve the database connection."
