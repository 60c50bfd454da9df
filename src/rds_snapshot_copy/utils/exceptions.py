"""Exception classes and validation utilities for snapshot copy preparation.

Upstream AWS failures are not represented here: botocore's ``ClientError``
and ``BotoCoreError`` reach the caller unchanged.
"""

import re


class ResolutionError(Exception):
    """Base class for failures that leave the parameters unresolved."""

    pass


class EmptyCandidateSetError(ResolutionError):
    """Raised when a choice is required but nothing was found to choose from."""

    def __init__(self, what: str):
        self.what = what
        super().__init__(f"No {what} found")


class MalformedRecordError(ResolutionError):
    """Raised when an API item lacks a field the listing depends on."""

    def __init__(self, record_type: str, field_name: str, record=None):
        self.record_type = record_type
        self.field_name = field_name
        self.record = record
        super().__init__(f"{record_type} record is missing required field '{field_name}'")


class SelectionCancelledError(ResolutionError):
    """Raised when the operator aborts a prompt."""

    pass


class AmbiguousChoiceError(ResolutionError):
    """Raised when two candidates would be shown under the same label."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"More than one candidate is labelled '{label}'")


class ValidationRules:
    """Validation utilities for AWS resources."""

    @staticmethod
    def validate_aws_account_id(account_id: str) -> bool:
        """Validate AWS account ID format (12 digits)."""
        return bool(re.match(r"^\d{12}$", account_id))
