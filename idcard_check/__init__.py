from idcard_check.errors import InvalidInputError
from idcard_check.extractor import IdCardInfo, extract_info
from idcard_check.validation import (
    compute_checksum,
    convert_legacy_to_modern,
    is_legacy_format,
    is_modern_format,
    is_plausible_format,
    is_plausible_legacy,
    is_valid_any,
    is_valid_modern,
    normalize,
    to_modern,
)

__all__ = [
    "IdCardInfo",
    "InvalidInputError",
    "compute_checksum",
    "convert_legacy_to_modern",
    "extract_info",
    "is_legacy_format",
    "is_modern_format",
    "is_plausible_format",
    "is_plausible_legacy",
    "is_valid_any",
    "is_valid_modern",
    "normalize",
    "to_modern",
]
