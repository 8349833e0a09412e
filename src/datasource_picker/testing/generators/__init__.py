"""Testing generators – Hypothesis strategies."""
from datasource_picker.testing.generators.strategies import (
    candidates_strategy,
    result_set_strategy,
    safe_text_strategy,
    sheet_name_strategy,
)

__all__ = [
    "candidates_strategy",
    "result_set_strategy",
    "safe_text_strategy",
    "sheet_name_strategy",
]
