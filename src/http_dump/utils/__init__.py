from .dump import dump, var_dump, PREFORMATTED_TAG
from .sanitizer import mask_sensitive_data, mask_string, add_sensitive_keys

__all__ = [
    "dump",
    "var_dump",
    "PREFORMATTED_TAG",
    "mask_sensitive_data",
    "mask_string",
    "add_sensitive_keys",
]
