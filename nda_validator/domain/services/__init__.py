from .csv_ingestor import (
    detect_framing,
    expected_base_name,
    parse_line,
    parse_table,
    validate_template_shortname,
)
from .field_name_checker import FieldNameCheck, check_new_field_name
from .range_validator import RangeValidator, restandardize_for_range, validate_values
from .schema_classifier import classify
from .structure_matcher import StructureMatch, rank_structures
from .suggestion_engine import SuggestionEngine, normalized_similarity
from .template_exporter import export_filename, export_template, template_line
from .value_standardizer import (
    StandardizationResult,
    ValueStandardizer,
    standardize_binary,
    standardize_handedness,
)

__all__ = [
    "FieldNameCheck",
    "RangeValidator",
    "StandardizationResult",
    "StructureMatch",
    "SuggestionEngine",
    "ValueStandardizer",
    "check_new_field_name",
    "classify",
    "detect_framing",
    "expected_base_name",
    "export_filename",
    "export_template",
    "normalized_similarity",
    "parse_line",
    "parse_table",
    "rank_structures",
    "restandardize_for_range",
    "standardize_binary",
    "standardize_handedness",
    "template_line",
    "validate_template_shortname",
    "validate_values",
]
