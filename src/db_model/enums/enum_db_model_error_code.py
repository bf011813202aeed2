# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Code Enumeration for the data access layer.

Each DbModelError subclass carries exactly one of these codes so callers can
classify failures without isinstance chains.
"""

from enum import Enum


class EnumDbModelErrorCode(str, Enum):
    """Error codes raised by db_model.

    Attributes:
        OPERATION_FAILED: Generic failure (base class default)
        CONNECTION_UNRESOLVED: No bound connection and no resolver
        CONNECTION_FAILED: Engine could not be created or verified
        MODEL_NOT_FOUND: Domain-tier lookup found nothing
        ROW_NOT_FOUND: Storage-tier lookup found nothing
        INVALID_PROCEDURE_NAME: Function/procedure name empty or malformed
    """

    OPERATION_FAILED = "OPERATION_FAILED"
    CONNECTION_UNRESOLVED = "CONNECTION_UNRESOLVED"
    CONNECTION_FAILED = "CONNECTION_FAILED"
    MODEL_NOT_FOUND = "MODEL_NOT_FOUND"
    ROW_NOT_FOUND = "ROW_NOT_FOUND"
    INVALID_PROCEDURE_NAME = "INVALID_PROCEDURE_NAME"

    @property
    def is_retriable(self) -> bool:
        """Return True if retrying the same call could succeed."""
        return self is EnumDbModelErrorCode.CONNECTION_FAILED


__all__ = ["EnumDbModelErrorCode"]
