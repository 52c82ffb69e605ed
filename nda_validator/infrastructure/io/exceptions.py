class ValidatorInfrastructureError(Exception):
    pass


class SchemaSourceError(ValidatorInfrastructureError):
    pass


class SchemaSourceNotFoundError(SchemaSourceError):
    pass


class SchemaParseError(SchemaSourceError):
    pass
