from typing import List, Dict, Optional
import pandas as pd

from shared.core.schemas import ExportResponse


def export_to_excel(
    data: List[Dict],
    filename: str = "export.xlsx",
    column_map: Optional[Dict[str, str]] = None,
) -> ExportResponse:
    """
    Shape a list of dictionaries into spreadsheet rows with friendly headers.

    Args:
        data: List of dictionaries (each dict = row)
        filename: Name the front-end should save the sheet under
        column_map: Mapping of data keys -> friendly column names, in column order
    """
    if not data:
        return ExportResponse(filename=filename, data=[])

    df = pd.DataFrame(data)

    if column_map:
        # Fill missing keys to avoid KeyError
        for key in column_map.keys():
            if key not in df.columns:
                df[key] = None
        df = df[list(column_map.keys())].rename(columns=column_map)

    # NaN is not valid JSON
    df = df.astype(object).where(pd.notnull(df), None)
    return ExportResponse(filename=filename, data=df.to_dict(orient="records"))
