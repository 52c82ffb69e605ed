from typing import ClassVar


class Defaults:
    MAX_SUGGESTIONS = 3
    SUGGESTION_THRESHOLD = 0.95
    FUZZY_SUGGESTIONS = False
    QUOTE_EXPORTED_CELLS = False
    ENCODING = "utf-8"
    DATA_ROW_OFFSET = 2


class TemplateFraming:
    MAX_TEMPLATE_CELLS = 2
    VERSION_SUFFIX_LENGTH = 2
    DELIMITER = ","
    QUOTE = '"'
    LINE_SEPARATOR = "\n"


class Patterns:
    TRAILING_DIGITS = "\\d+$"
    VERSION_NUMBER = "^\\d+$"


class StandardizationRules:
    HANDEDNESS_HEADER = "handedness"
    BINARY_SUFFIX = "_flag"
    BINARY_MARKER = "boolean"
    HANDEDNESS_TOKENS: ClassVar[frozenset[str]] = frozenset({"R", "L"})
    BINARY_TOKENS: ClassVar[frozenset[str]] = frozenset({"0", "1"})


class RangeSyntax:
    VALUE_SEPARATOR = ";"
    INTERVAL_SEPARATOR = "::"


class RequirementLevels:
    REQUIRED = "Required"
    RECOMMENDED = "Recommended"
    OTHER = "Other"


class Messages:
    PARSE_FAILED = "Failed to parse CSV file. Please ensure it's properly formatted."
    READ_FAILED = "Failed to read file. Please try again."
    EMPTY_FILE = "CSV file is empty."
    MISSING_HEADER_ROW = "Submission template has no header row."


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
