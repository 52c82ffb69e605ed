from enum import StrEnum


class ErrorKind(StrEnum):
    MALFORMED_INPUT = "MalformedInput"
    SCHEMA_MISMATCH = "SchemaMismatch"
    ACQUISITION_FAILURE = "AcquisitionFailure"


class ValidatorError(Exception):
    kind: ErrorKind = ErrorKind.MALFORMED_INPUT


class MalformedInputError(ValidatorError):
    kind = ErrorKind.MALFORMED_INPUT


class SchemaMismatchError(ValidatorError):
    kind = ErrorKind.SCHEMA_MISMATCH

    def __init__(
        self, actual_base: str, actual_version: str, expected_base: str
    ) -> None:
        self.actual_base = actual_base
        self.actual_version = actual_version
        self.expected_base = expected_base
        super().__init__(
            f'Invalid structure shortname. Found "{actual_base},{actual_version}". '
            f'Should be "{expected_base}" followed by a version number'
        )


class AcquisitionFailureError(ValidatorError):
    kind = ErrorKind.ACQUISITION_FAILURE
