import math

import numpy as np
import pandas as pd


def value_to_text(value) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        # list-likes have no scalar NA answer
        pass
    return str(value)


def coerce_cell_text(text):
    """Numeric value when the whole stripped text parses as a number, else the text.

    Unlike a numeric-prefix parse, trailing junk keeps the cell as text, so
    "12abc" stays "12abc". Infinities are numbers; only NaN stays text.
    """
    text = "" if text is None else str(text)
    stripped = text.strip()
    if stripped == "" or "_" in stripped:
        return text

    try:
        return int(stripped)
    except ValueError:
        pass

    try:
        number = float(stripped)
    except ValueError:
        return text
    if math.isnan(number):
        return text
    return number
